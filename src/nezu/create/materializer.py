"""Copy a template tree into the target directory and post-process it."""

import os
import shutil
from typing import Callable, Iterable, Optional, Tuple

from nezu.create.errors import CopyError
from nezu.create.selection import ProjectType

# Ignore files ship without their dot so the template's own tooling
# does not apply them to the template directory.
_RENAMES = {
    ProjectType.LIBRARY: (("gitignore", ".gitignore"),),
}


def renames_for(project_type: ProjectType) -> Tuple[Tuple[str, str], ...]:
    return _RENAMES.get(project_type, ())


def materialize(
    template_path,
    target_root,
    renames: Iterable[Tuple[str, str]] = (),
    log: Optional[Callable[[str], None]] = None,
):
    """Copy *template_path* into *target_root*, then apply *renames* there.

    target_root must not exist yet; copytree creates it. Renames are
    relative to target_root and never touch the template tree. A partial
    copy is left in place on failure.

    Raises:
        CopyError: If copying or renaming fails.
    """
    template_path = os.fspath(template_path)
    target_root = os.fspath(target_root)
    try:
        shutil.copytree(template_path, target_root, copy_function=shutil.copy2)
    except (OSError, shutil.Error) as e:
        raise CopyError(template_path, target_root, e) from e

    for source_name, target_name in renames:
        _rename_in_target(target_root, source_name, target_name, log)


def _rename_in_target(target_root, source_name, target_name, log):
    source = os.path.join(target_root, source_name)
    target = os.path.join(target_root, target_name)
    if not os.path.exists(source):
        if log:
            log(f"Skipping rename of {source_name}: not present in template")
        return
    try:
        os.replace(source, target)
    except OSError as e:
        raise CopyError(source, target, e) from e
    if log:
        log(f"Renamed {source_name} to {target_name}")
