"""Refuse to scaffold into a path that already exists."""

import os

from nezu.create.errors import DirectoryExistsError


def ensure_target_absent(root):
    """Raise DirectoryExistsError if *root* exists as a file, directory or link."""
    if os.path.lexists(root):
        raise DirectoryExistsError(root)
