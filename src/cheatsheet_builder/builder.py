"""Build orchestrator for the markdown -> HTML -> PDF conversion.

Runs the two build stages in order against the fixed file names of a
BuildConfig. The first failing stage ends the build; nothing is retried.
"""

import logging
from pathlib import Path

from cheatsheet_builder.tools import InputNotFoundError
from cheatsheet_builder.transformers import (
    DocumentTransformer,
    HTMLTransformer,
    PDFTransformer,
)
from schemas.build import BuildConfig, BuildResult

logger = logging.getLogger(__name__)


class CheatsheetBuilder:
    """Build the cheat-sheet PDF from its markdown source.

    Attributes:
        directory: Directory holding the source and receiving the outputs
        config: File names, title and renderer for the build
        html_transformer: Stage A (markdown -> HTML)
        pdf_transformer: Stage B (HTML -> PDF)
    """

    def __init__(
        self,
        directory: Path,
        config: BuildConfig | None = None,
        html_transformer: DocumentTransformer | None = None,
        pdf_transformer: DocumentTransformer | None = None,
    ):
        self.directory = directory
        self.config = config or BuildConfig()
        self.html_transformer = html_transformer or HTMLTransformer(title=self.config.title)
        self.pdf_transformer = pdf_transformer or self._default_pdf_transformer()

    def _default_pdf_transformer(self) -> DocumentTransformer:
        if self.config.renderer == "weasyprint":
            from cheatsheet_builder.transformers.weasyprint_transformer import (
                WeasyPrintTransformer,
            )

            return WeasyPrintTransformer()
        return PDFTransformer(
            enable_local_file_access=self.config.enable_local_file_access,
        )

    def build(self) -> BuildResult:
        """Run both stages and return the result.

        Returns:
            BuildResult with both artifacts and status "complete"

        Raises:
            InputNotFoundError: If the source document does not exist
            ToolError: From whichever stage fails
        """
        paths = self.config.paths(self.directory)
        if not paths.source.exists():
            raise InputNotFoundError(
                paths.source, f"Source document not found: {paths.source}"
            )

        result = BuildResult(source=str(paths.source), title=self.config.title)

        result.html = self.html_transformer.transform(paths.source, paths.html)
        result.warnings.extend(self._check_html(result))

        result.pdf = self.pdf_transformer.transform(paths.html, paths.pdf)
        result.status = "complete"

        logger.info(f"Built {paths.pdf.name} ({result.pdf.page_count} pages)")
        return result

    def _check_html(self, result: BuildResult) -> list[str]:
        """Collect non-fatal problems with the intermediate HTML."""
        warnings = []
        html = result.html

        if html.title != self.config.title:
            warnings.append(
                f"HTML title is {html.title!r}, expected {self.config.title!r}"
            )
        for asset in html.missing_assets:
            warnings.append(f"Referenced asset not found: {asset}")

        for warning in warnings:
            logger.warning(warning)
        return warnings
