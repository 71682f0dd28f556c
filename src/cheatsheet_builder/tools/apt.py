"""Wrapper for the Debian apt-get package manager."""

import os

from .tool import Tool


class AptGet(Tool):
    """Install host packages with apt-get.

    Runs through sudo unless the current process is already root. Output is
    not captured so apt's progress and any sudo prompt reach the terminal.

    Config keys (in addition to Tool's):
        use_sudo: Force sudo on or off (default: only when not root)
    """

    name = "apt-get"

    def __init__(self, config: dict | None = None):
        config = dict(config or {})
        config.setdefault("capture_output", False)
        super().__init__(config)

    @property
    def use_sudo(self) -> bool:
        if "use_sudo" in self._config:
            return bool(self._config["use_sudo"])
        return os.geteuid() != 0

    def command(self, *args: str) -> list[str]:
        argv = super().command(*args)
        if self.use_sudo:
            return ["sudo", *argv]
        return argv

    def install(self, packages: list[str]) -> None:
        """Install packages non-interactively.

        Args:
            packages: Package names to install

        Raises:
            ToolNotFoundError: If apt-get or sudo is missing
            ToolFailedError: With apt-get's exit status if installation fails
        """
        self.run("install", "-y", *packages)
