"""PDF Transformers for rendering the intermediate HTML to PDF.

The default renderer is wkhtmltopdf; page counts are read back with PyMuPDF
to confirm the output is a usable PDF.
"""

import logging
from abc import abstractmethod
from pathlib import Path

import fitz  # PyMuPDF

from cheatsheet_builder.tools import OutputError, Wkhtmltopdf
from schemas.build import Artifact

from .transformer import DocumentTransformer

logger = logging.getLogger(__name__)


class BasePDFTransformer(DocumentTransformer):
    """Render HTML to PDF and verify the written file.

    Subclasses implement _render(); transform() checks that the PDF exists,
    is non-empty and opens with at least one page.
    """

    def transform(self, input_path: Path, output_path: Path) -> Artifact:
        """Render HTML to PDF and verify the result.

        Args:
            input_path: HTML file to render
            output_path: PDF file to write

        Returns:
            Artifact for the PDF, including its page count

        Raises:
            ToolNotFoundError: If the renderer is not installed
            ToolFailedError: If the renderer exits nonzero
            OutputError: If the PDF is missing, empty or unreadable
        """
        logger.info(f"Rendering {input_path.name} to PDF")
        self._render(input_path, output_path)

        if not output_path.exists():
            raise OutputError(f"PDF output was not written: {output_path}", output_path)

        size = output_path.stat().st_size
        if size == 0:
            raise OutputError(f"PDF output is empty: {output_path}", output_path)

        page_count = self._count_pages(output_path)
        logger.debug(f"Wrote {output_path} ({size} bytes, {page_count} pages)")

        return Artifact(path=str(output_path), size=size, page_count=page_count)

    @abstractmethod
    def _render(self, html_path: Path, pdf_path: Path) -> None:
        """Write pdf_path from html_path."""
        pass

    def _count_pages(self, pdf_path: Path) -> int:
        """Count the number of pages in a PDF file.

        Args:
            pdf_path: Path to the PDF file

        Returns:
            Number of pages in the PDF

        Raises:
            OutputError: If the file cannot be opened as a PDF or has no pages
        """
        try:
            doc = fitz.open(str(pdf_path))
        except RuntimeError as e:
            raise OutputError(f"PDF output is unreadable: {pdf_path}: {e}", pdf_path) from e

        page_count = len(doc)
        doc.close()

        if page_count == 0:
            raise OutputError(f"PDF output has no pages: {pdf_path}", pdf_path)
        return page_count


class PDFTransformer(BasePDFTransformer):
    """Transform an HTML page into a PDF with wkhtmltopdf.

    Attributes:
        wkhtmltopdf: Wrapper used to run the renderer
        enable_local_file_access: Allow the renderer to load local assets
    """

    def __init__(
        self,
        wkhtmltopdf: Wkhtmltopdf | None = None,
        enable_local_file_access: bool = True,
    ):
        self.wkhtmltopdf = wkhtmltopdf or Wkhtmltopdf()
        self.enable_local_file_access = enable_local_file_access

    def _render(self, html_path: Path, pdf_path: Path) -> None:
        self.wkhtmltopdf.to_pdf(
            html_path,
            pdf_path,
            enable_local_file_access=self.enable_local_file_access,
        )
