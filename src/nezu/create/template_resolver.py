"""Map a project selection onto a template directory shipped with nezu."""

from pathlib import Path
from typing import Optional

from nezu.create.selection import ArchetypeSelection, Language, ProjectType

PROJECT_TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "project-templates"

# React SPA has no template yet.
_TEMPLATE_PATHS = {
    (ProjectType.LIBRARY, Language.JAVASCRIPT): Path("library", "javascript"),
    (ProjectType.LIBRARY, Language.TYPESCRIPT): Path("library", "typescript"),
}


def resolve_template(
    selection: ArchetypeSelection, templates_dir: Optional[Path] = None,
) -> Optional[Path]:
    """Return the template root for *selection*, or None if unsupported.

    Paths are resolved against the installed package, never the user's
    working directory.
    """
    relative = _TEMPLATE_PATHS.get((selection.type, selection.language))
    if relative is None:
        return None
    base = templates_dir if templates_dir is not None else PROJECT_TEMPLATES_DIR
    return base / relative
