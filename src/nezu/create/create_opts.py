"""Options and plan dataclasses for the create workflow."""

from dataclasses import dataclass

from nezu.create.location import ResolvedLocation
from nezu.create.selection import ArchetypeSelection


@dataclass(frozen=True)
class CreateOpts:
    """All options for the create command."""

    name: str
    verbose: bool = False
    package_manager: str = "npm"


@dataclass(frozen=True)
class ScaffoldPlan:
    """Everything the remaining stages need once the user has chosen."""

    opts: CreateOpts
    location: ResolvedLocation
    selection: ArchetypeSelection

    @property
    def root(self):
        return self.location.root

    @property
    def project_id(self):
        return self.location.project_id
