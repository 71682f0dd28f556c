"""HTML Transformer for converting the markdown source to standalone HTML.

Runs pandoc with a fixed title so the rendering's <title> never depends on
the source content.
"""

import logging
from pathlib import Path

from cheatsheet_builder.tools import OutputError, Pandoc
from schemas.build import DEFAULT_TITLE, Artifact

from .inspection import inspect_html
from .transformer import DocumentTransformer

logger = logging.getLogger(__name__)


class HTMLTransformer(DocumentTransformer):
    """Transform a markdown document into a standalone HTML page.

    Attributes:
        title: Title metadata passed to every conversion
        pandoc: Pandoc wrapper used to run the conversion
    """

    def __init__(self, title: str = DEFAULT_TITLE, pandoc: Pandoc | None = None):
        """Initialize the HTML transformer.

        Args:
            title: Title metadata for the rendering (default: "Cheatsheet")
            pandoc: Pandoc wrapper (default: pandoc found on PATH)
        """
        self.title = title
        self.pandoc = pandoc or Pandoc()

    def transform(self, input_path: Path, output_path: Path) -> Artifact:
        """Convert markdown to HTML.

        Args:
            input_path: Markdown source document
            output_path: HTML file to write

        Returns:
            Artifact for the HTML file, including the title found in it

        Raises:
            ToolNotFoundError: If pandoc is not installed
            ToolFailedError: If pandoc exits nonzero (e.g. missing source)
            OutputError: If pandoc reported success but wrote nothing
        """
        logger.info(f"Converting {input_path.name} to HTML")
        self.pandoc.to_html(input_path, output_path, self.title)

        if not output_path.exists():
            raise OutputError(f"HTML output was not written: {output_path}", output_path)
        if output_path.stat().st_size == 0:
            raise OutputError(f"HTML output is empty: {output_path}", output_path)

        report = inspect_html(output_path)
        artifact = Artifact(
            path=str(output_path),
            size=output_path.stat().st_size,
            title=report.title,
            missing_assets=[str(p) for p in report.missing_assets],
        )
        logger.debug(f"Wrote {output_path} ({artifact.size} bytes)")
        return artifact
