"""Host provisioning for the external programs the build needs."""

import logging

from cheatsheet_builder.tools import AptGet, Pandoc, Tool, Wkhtmltopdf
from schemas.build import ToolStatus

logger = logging.getLogger(__name__)


class Provisioner:
    """Check for and install the build's external programs.

    Attributes:
        tools: External programs the build shells out to
        apt: Package manager wrapper used for installation
    """

    def __init__(self, tools: list[Tool] | None = None, apt: AptGet | None = None):
        self.tools = tools if tools is not None else [Pandoc(), Wkhtmltopdf()]
        self.apt = apt or AptGet()

    @property
    def packages(self) -> list[str]:
        return [tool.package for tool in self.tools if tool.package]

    def check(self) -> list[ToolStatus]:
        """Report whether each required program is installed."""
        statuses = []
        for tool in self.tools:
            status = ToolStatus(
                name=tool.name,
                package=tool.package or tool.name,
                executable=tool.executable,
                path=tool.which(),
            )
            logger.debug(f"{status.name}: {status.path or 'not found'}")
            statuses.append(status)
        return statuses

    def install(self) -> None:
        """Install every required package with the host package manager.

        Package manager failures propagate unchanged as ToolFailedError or
        ToolNotFoundError.
        """
        packages = self.packages
        logger.info(f"Installing packages: {' '.join(packages)}")
        self.apt.install(packages)
        logger.info("Installation complete")
