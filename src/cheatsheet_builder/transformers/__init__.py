"""Transformers for the markdown -> HTML -> PDF build stages.

WeasyPrintTransformer lives in .weasyprint_transformer and is imported only
when that renderer is selected.
"""

from .html_transformer import HTMLTransformer
from .inspection import HTMLReport, inspect_html
from .pdf_transformer import BasePDFTransformer, PDFTransformer
from .transformer import DocumentTransformer

__all__ = [
    "DocumentTransformer",
    "HTMLTransformer",
    "BasePDFTransformer",
    "PDFTransformer",
    "HTMLReport",
    "inspect_html",
]
