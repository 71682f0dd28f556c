"""Wrapper for the wkhtmltopdf renderer."""

from pathlib import Path

from .tool import Tool


class Wkhtmltopdf(Tool):
    """Render an HTML file to PDF with wkhtmltopdf."""

    name = "wkhtmltopdf"
    package = "wkhtmltopdf"

    def to_pdf(
        self,
        html: Path,
        output: Path,
        enable_local_file_access: bool = True,
    ) -> None:
        """Render an HTML file to PDF.

        Local file access is off by default in recent wkhtmltopdf releases,
        so pages referencing local images need it enabled explicitly.

        Args:
            html: HTML file to render
            output: PDF file to write (overwritten if present)
            enable_local_file_access: Allow loading file:// resources
        """
        args = []
        if enable_local_file_access:
            args.append("--enable-local-file-access")
        args.extend([str(html), str(output)])
        self.run(*args)
