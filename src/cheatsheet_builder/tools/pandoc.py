"""Wrapper for the pandoc markdown converter."""

from pathlib import Path

from .tool import Tool


class Pandoc(Tool):
    """Convert markdown to a standalone HTML document with pandoc."""

    name = "pandoc"
    package = "pandoc"

    def to_html(self, source: Path, output: Path, title: str) -> None:
        """Write a standalone HTML rendering of a markdown file.

        Equivalent to ``pandoc -s SOURCE -o OUTPUT --metadata title=TITLE``.

        Args:
            source: Markdown file to convert
            output: HTML file to write (overwritten if present)
            title: Value for the document's title metadata
        """
        self.run(
            "-s",
            str(source),
            "-o",
            str(output),
            "--metadata",
            f"title={title}",
        )
