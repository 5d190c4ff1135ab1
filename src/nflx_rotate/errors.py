"""Error taxonomy for a rotation run.

Each error carries a ``kind`` (a short, stable name) and the process exit
code the command line maps it to, so scripts can branch on the cause.
"""
from typing import Optional


class RotateError(Exception):
    """Base exception for rotation failures."""

    kind = "error"
    exit_code = 1

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.message}: {self.cause}"
        return self.message


class SessionSetupError(RotateError):
    """The temporary browser profile could not be created."""

    kind = "session_setup"
    exit_code = 7


class BrowserLaunchError(SessionSetupError):
    """The browser process could not be started."""

    kind = "browser_launch"
    exit_code = 1


class ExecutionError(RotateError):
    """A browser action step faulted; the remaining steps did not run."""

    kind = "browser_execution"
    exit_code = 1

    def __init__(self, message: str, step=None, cause: Optional[BaseException] = None):
        super().__init__(message, cause)
        self.step = step


class VerificationError(RotateError):
    """The DOM probe script itself failed to evaluate."""

    kind = "verification"
    exit_code = 2


class StageRejected(RotateError):
    """The site answered, but the stage did not succeed."""

    stage = ""

    def __init__(self, message: str, reason: Optional[str] = None):
        super().__init__(message)
        self.reason = reason

    def __str__(self) -> str:
        return f"{self.message}: {self.reason or 'unrecognized failure'}"


class LoginRejected(StageRejected):
    kind = "login_rejected"
    exit_code = 3
    stage = "login"


class UpdateRejected(StageRejected):
    kind = "update_rejected"
    exit_code = 4
    stage = "update"


class InputError(RotateError):
    """Command line options or interactive input were invalid."""

    kind = "input"
    exit_code = 5


class GenerationError(RotateError):
    """The new password could not be generated under the requested policy."""

    kind = "generation"
    exit_code = 6


class OutputWriteError(RotateError):
    """The new password could not be written to the output file."""

    kind = "write"
    exit_code = 8
