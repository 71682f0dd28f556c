"""In-process HTML to PDF rendering with WeasyPrint.

Not imported by the package: WeasyPrint needs pango at import time, and only
the optional "weasyprint" renderer uses it.
"""

import logging
from pathlib import Path

from weasyprint import HTML

from .pdf_transformer import BasePDFTransformer

logger = logging.getLogger(__name__)


class WeasyPrintTransformer(BasePDFTransformer):
    """Render the intermediate HTML to PDF with WeasyPrint instead of wkhtmltopdf.

    WeasyPrint always reads local files, so there is no access flag to pass.
    Relative references resolve against the HTML file's directory unless a
    base_url is given.

    Attributes:
        base_url: Base URL for resolving relative paths (optional)
    """

    def __init__(self, base_url: str | None = None):
        self.base_url = base_url

    def _render(self, html_path: Path, pdf_path: Path) -> None:
        base_url = self.base_url or html_path.parent.resolve().as_uri() + "/"
        HTML(filename=str(html_path), base_url=base_url).write_pdf(str(pdf_path))
        logger.debug(f"WeasyPrint rendered {html_path.name}")
