"""Run the project's package manager to install its dependencies."""

import shlex
import subprocess
from dataclasses import dataclass
from typing import Callable, List, Optional

from nezu.create.managed_subprocess import ManagedSubprocess

PACKAGE_MANAGERS = {
    "npm": ["npm", "install"],
    "yarn": ["yarn", "install"],
    "pnpm": ["pnpm", "install"],
}

EXIT_NOT_FOUND = 127
EXIT_INTERRUPTED = 130


@dataclass(frozen=True)
class InstallOutcome:
    """Exit status of one installer run and the command that produced it."""

    exit_code: int
    command: str

    @property
    def succeeded(self):
        return self.exit_code == 0


def install_command(package_manager: str) -> List[str]:
    try:
        return list(PACKAGE_MANAGERS[package_manager])
    except KeyError:
        raise ValueError(f"Unsupported package manager: {package_manager}") from None


class DependencyInstaller:
    """Spawns the package manager in the project root with the terminal attached.

    Output is not captured; the user sees the installer's own progress.
    Blocks until the child exits. No timeout.
    """

    def __init__(
        self,
        package_manager: str = "npm",
        log: Optional[Callable[[str], None]] = None,
        popen=subprocess.Popen,
    ):
        self.package_manager = package_manager
        self._cmd = install_command(package_manager)
        self._log = log
        self._popen = popen

    @property
    def command(self) -> str:
        return shlex.join(self._cmd)

    def install(self, root: str) -> InstallOutcome:
        if self._log:
            self._log(f"Running `{self.command}` in {root}")
        try:
            process = self._popen(self._cmd, cwd=root, start_new_session=True)
        except FileNotFoundError:
            if self._log:
                self._log(f"{self._cmd[0]} was not found on PATH")
            return InstallOutcome(exit_code=EXIT_NOT_FOUND, command=self.command)

        with ManagedSubprocess(process, label=self._cmd[0]) as managed:
            process.wait()

        exit_code = EXIT_INTERRUPTED if managed.interrupted else process.returncode
        if self._log:
            self._log(f"{self._cmd[0]} exited with code {exit_code}")
        return InstallOutcome(exit_code=exit_code, command=self.command)
