"""Base class for build stage transformers.

Each transformer turns one file into another:

- HTMLTransformer: markdown source -> intermediate HTML (pandoc)
- PDFTransformer: intermediate HTML -> output PDF (wkhtmltopdf)
- WeasyPrintTransformer: intermediate HTML -> output PDF (in-process, optional)
"""

from abc import ABC, abstractmethod
from pathlib import Path

from schemas.build import Artifact


class DocumentTransformer(ABC):
    """Abstract base class for single-file build stages."""

    @abstractmethod
    def transform(self, input_path: Path, output_path: Path) -> Artifact:
        """Convert one file into another.

        Args:
            input_path: File to read
            output_path: File to write (overwritten if present)

        Returns:
            Artifact describing the written file
        """
        pass
