"""Build schemas for the cheat-sheet document build.

A build reads one markdown source and produces two derived files next to it:

    {directory}/
    ├── PosCheatSheet.md      # source document (hand-authored, never written)
    ├── PosCheatSheet.html    # intermediate rendering (rewritten every build)
    └── PosCheatSheet.pdf     # output artifact (rewritten every build)

None of these models are persisted; they describe a build while it runs and
are reported by the CLI.
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel

DEFAULT_SOURCE = "PosCheatSheet.md"
DEFAULT_HTML = "PosCheatSheet.html"
DEFAULT_PDF = "PosCheatSheet.pdf"
DEFAULT_TITLE = "Cheatsheet"


class BuildPaths(BaseModel):
    """Resolved locations of the three files involved in a build."""

    source: Path
    html: Path
    pdf: Path


class BuildConfig(BaseModel):
    """Fixed settings for a cheat-sheet build.

    Attributes:
        source: File name of the markdown source document
        html: File name of the intermediate HTML rendering
        pdf: File name of the output PDF
        title: Title metadata injected into the HTML stage
        renderer: Which HTML-to-PDF renderer to use
        enable_local_file_access: Let the renderer load local assets (images, CSS)
    """

    source: str = DEFAULT_SOURCE
    html: str = DEFAULT_HTML
    pdf: str = DEFAULT_PDF
    title: str = DEFAULT_TITLE
    renderer: Literal["wkhtmltopdf", "weasyprint"] = "wkhtmltopdf"
    enable_local_file_access: bool = True

    model_config = {"frozen": True}

    def paths(self, directory: Path) -> BuildPaths:
        """Resolve the configured file names against a working directory."""
        return BuildPaths(
            source=directory / self.source,
            html=directory / self.html,
            pdf=directory / self.pdf,
        )


class Artifact(BaseModel):
    """A file produced by one build stage.

    Attributes:
        path: Absolute path of the produced file
        size: Size in bytes
        page_count: Number of pages (PDF only)
        title: Document title found in the file (HTML only)
        missing_assets: Local files the document references that do not exist (HTML only)
    """

    path: str
    size: int
    page_count: int | None = None
    title: str | None = None
    missing_assets: list[str] = []


class BuildResult(BaseModel):
    """Outcome of a single build invocation."""

    source: str
    title: str
    html: Artifact | None = None
    pdf: Artifact | None = None
    status: Literal["building", "complete"] = "building"
    warnings: list[str] = []


class ToolStatus(BaseModel):
    """Availability of one external program on the host.

    Attributes:
        name: Program name (e.g., "pandoc")
        package: Host package that provides the program
        executable: Executable name or path looked up on PATH
        path: Resolved location of the executable, if installed
    """

    name: str
    package: str
    executable: str
    path: str | None = None

    @property
    def available(self) -> bool:
        return self.path is not None
