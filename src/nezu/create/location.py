"""Resolve the user-supplied project name into a target location."""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ResolvedLocation:
    """Absolute target directory and the project id derived from it."""

    root: str
    project_id: str


def resolve_location(name: str, cwd: Optional[str] = None) -> ResolvedLocation:
    """Resolve *name* against *cwd* (default: the process working directory).

    No filesystem access beyond reading the working directory.
    """
    base = cwd if cwd is not None else os.getcwd()
    root = os.path.normpath(os.path.join(base, os.path.expanduser(name)))
    return ResolvedLocation(root=root, project_id=os.path.basename(root))
