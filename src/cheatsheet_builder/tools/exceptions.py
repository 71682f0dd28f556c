"""Custom exceptions for external tool invocations."""


class ToolError(Exception):
    """Base exception for all build tool errors.

    Attributes:
        message: Human-readable description of the failure
        returncode: Process exit status the CLI reports for this error
    """

    returncode = 1

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class ToolNotFoundError(ToolError):
    """Raised when an external program is not installed."""

    returncode = 127

    def __init__(self, tool: str, message: str | None = None):
        self.tool = tool
        super().__init__(message or f"{tool}: command not found")


class ToolFailedError(ToolError):
    """Raised when an external program exits with a nonzero status.

    A program killed by a signal reports a negative status from subprocess;
    it is stored the way a shell reports it (128 + signal number) so the CLI
    never exits with a negative code.

    Attributes:
        signal: Signal number that killed the program, or None
    """

    def __init__(
        self,
        message: str,
        tool: str,
        returncode: int,
        stderr: str = "",
        *args,
        **kwargs,
    ):
        self.tool = tool
        self.signal = -returncode if returncode < 0 else None
        self.returncode = 128 + self.signal if self.signal else returncode
        self.stderr = stderr
        super().__init__(message, *args, **kwargs)


class InputNotFoundError(ToolError):
    """Raised when the input file for a build stage does not exist."""

    def __init__(self, path, message: str | None = None):
        self.path = path
        super().__init__(message or f"Input file not found: {path}")


class OutputError(ToolError):
    """Raised when a build stage leaves a missing, empty or unreadable file."""

    def __init__(self, message: str, path=None, *args, **kwargs):
        self.path = path
        super().__init__(message, *args, **kwargs)
