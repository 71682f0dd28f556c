"""Base class for external command-line programs."""

import logging
import shlex
import shutil
import subprocess
from abc import ABC
from pathlib import Path

from .exceptions import ToolFailedError, ToolNotFoundError

logger = logging.getLogger(__name__)


class Tool(ABC):
    """Base class for external programs invoked as blocking subprocesses.

    Every invocation runs to completion: no retries, no timeout. A missing
    executable raises ToolNotFoundError and a nonzero exit raises
    ToolFailedError carrying the program's own exit status and stderr.

    Config keys:
        executable: Program name or path (default: the tool's name)
        cwd: Working directory for the process (default: inherited)
        capture_output: Capture stdout/stderr instead of inheriting the
            terminal (default: True)
    """

    name: str = ""
    package: str | None = None

    def __init__(self, config: dict | None = None):
        self._config = dict(config or {})

    @property
    def executable(self) -> str:
        return str(self._config.get("executable", self.name))

    @property
    def cwd(self) -> Path | None:
        cwd = self._config.get("cwd")
        return Path(cwd) if cwd is not None else None

    @property
    def capture_output(self) -> bool:
        return bool(self._config.get("capture_output", True))

    def which(self) -> str | None:
        """Return the resolved path of the executable, or None if absent."""
        return shutil.which(self.executable)

    def command(self, *args: str) -> list[str]:
        """Build the full argument vector for an invocation."""
        return [self.executable, *args]

    def run(self, *args: str) -> subprocess.CompletedProcess:
        """Run the program with the given arguments and wait for it to exit.

        Args:
            *args: Command-line arguments passed after the executable

        Returns:
            The completed process

        Raises:
            ToolNotFoundError: If the executable cannot be found
            ToolFailedError: If the program exits with a nonzero status
        """
        argv = self.command(*args)
        logger.debug(f"Running: {shlex.join(argv)}")

        try:
            result = subprocess.run(
                argv,
                cwd=self.cwd,
                capture_output=self.capture_output,
                text=True,
                check=False,
            )
        except FileNotFoundError as e:
            raise ToolNotFoundError(argv[0]) from e

        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            if result.returncode < 0:
                reason = f"was killed by signal {-result.returncode}"
            else:
                reason = f"exited with status {result.returncode}"
            raise ToolFailedError(
                f"{argv[0]} {reason}"
                + (f": {stderr}" if stderr else ""),
                tool=argv[0],
                returncode=result.returncode,
                stderr=stderr,
            )

        if result.stderr:
            for line in result.stderr.strip().splitlines():
                logger.debug(f"{argv[0]}: {line}")

        return result
