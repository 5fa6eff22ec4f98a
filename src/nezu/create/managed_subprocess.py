"""Keep a foreground child process under the user's control.

The installer runs in its own session so the terminal's job-control
signals reach nezu first; this context forwards them to the child's
process group and tears the whole group down on Ctrl+C, hangup or
termination.
"""

import os
import signal
import subprocess
import sys

_HAS_JOB_CONTROL = hasattr(signal, "SIGTSTP") and hasattr(os, "killpg")

# Signals that end nezu; the child's group gets the same signal first.
_FATAL_SIGNALS = ("SIGHUP", "SIGTERM")


class ManagedSubprocess:
    """Context manager for a child started with start_new_session=True.

    On KeyboardInterrupt the child's process group gets SIGTERM, then
    SIGKILL after terminate_timeout seconds; the interrupt is suppressed
    and ``interrupted`` is set so the caller can report it. SIGHUP and
    SIGTERM are forwarded to the group before nezu itself exits.
    """

    def __init__(self, process: subprocess.Popen, label: str, terminate_timeout: float = 5.0):
        self.process = process
        self.label = label
        self.terminate_timeout = terminate_timeout
        self.interrupted = False
        self._original_handlers = {}

    def _handle_sigtstp(self, signum, frame):
        self._signal_group(signal.SIGTSTP)
        signal.signal(signal.SIGTSTP, signal.SIG_DFL)
        os.kill(os.getpid(), signal.SIGTSTP)

    def _handle_sigcont(self, signum, frame):
        self._signal_group(signal.SIGCONT)
        signal.signal(signal.SIGTSTP, self._handle_sigtstp)

    def _handle_fatal(self, signum, frame):
        self._signal_group(signum)
        signal.signal(signum, self._original_handlers.get(signum, signal.SIG_DFL))
        os.kill(os.getpid(), signum)

    def _signal_group(self, signum):
        try:
            os.killpg(self.process.pid, signum)
        except ProcessLookupError:
            pass

    def _install_handler(self, signum, handler):
        self._original_handlers[signum] = signal.getsignal(signum)
        signal.signal(signum, handler)

    def __enter__(self) -> "ManagedSubprocess":
        if _HAS_JOB_CONTROL:
            self._install_handler(signal.SIGTSTP, self._handle_sigtstp)
            self._install_handler(signal.SIGCONT, self._handle_sigcont)
            for name in _FATAL_SIGNALS:
                self._install_handler(getattr(signal, name), self._handle_fatal)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        try:
            if exc_type is KeyboardInterrupt:
                return self._terminate_child()
            return False
        finally:
            for signum, handler in self._original_handlers.items():
                signal.signal(signum, handler)
            self._original_handlers = {}

    def _terminate_child(self) -> bool:
        print(f"\nInterrupted. Stopping {self.label}...", file=sys.stderr)
        self._terminate()
        try:
            self.process.wait(timeout=self.terminate_timeout)
        except subprocess.TimeoutExpired:
            print(f"{self.label} did not exit, killing it...", file=sys.stderr)
            self._kill()
            self.process.wait()
        self.interrupted = True
        return True

    def _terminate(self):
        if _HAS_JOB_CONTROL:
            self._signal_group(signal.SIGTERM)
        else:
            self.process.terminate()

    def _kill(self):
        if _HAS_JOB_CONTROL:
            self._signal_group(signal.SIGKILL)
        else:
            self.process.kill()
