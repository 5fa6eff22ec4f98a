"""Errors raised by the create workflow.

Every stage failure derives from ScaffoldError so the CLI can report it
with a single handler and a non-zero exit.
"""


class ScaffoldError(Exception):
    """Base class for failures that abort project creation."""


class DirectoryExistsError(ScaffoldError):

    def __init__(self, root):
        self.root = root
        super().__init__(
            f"Directory {root} already exists, please specify another directory"
        )


class TemplateUnavailableError(ScaffoldError):

    def __init__(self, selection, reason="is not implemented yet"):
        self.selection = selection
        super().__init__(f"{selection.describe()} template {reason}")


class CopyError(ScaffoldError):

    def __init__(self, source, target, cause):
        self.source = source
        self.target = target
        self.cause = cause
        super().__init__(f"Failed to copy template {source} to {target}: {cause}")


class InstallFailure(ScaffoldError):
    """Raised when the package manager exits non-zero.

    Carries the exact command so the user can re-run it by hand.
    """

    def __init__(self, command, exit_code, root=None):
        self.command = command
        self.exit_code = exit_code
        self.root = root
        super().__init__(f"`{command}` failed with exit code {exit_code}")
