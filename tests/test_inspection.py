"""Tests for intermediate HTML inspection."""

from cheatsheet_builder.transformers.inspection import inspect_html


def write_html(path, head="", body=""):
    path.write_text(
        "<!DOCTYPE html>\n<html><head>"
        f"{head}</head><body>{body}</body></html>\n"
    )
    return path


class TestInspectHTMLTitle:
    """Tests for title extraction."""

    def test_reads_title(self, tmp_path):
        """inspect_html() returns the <title> text."""
        html_path = write_html(tmp_path / "page.html", head="<title> Cheatsheet </title>")

        assert inspect_html(html_path).title == "Cheatsheet"

    def test_missing_title(self, tmp_path):
        """inspect_html() returns None when there is no <title>."""
        html_path = write_html(tmp_path / "page.html", body="<p>text</p>")

        assert inspect_html(html_path).title is None


class TestInspectHTMLAssets:
    """Tests for local asset detection."""

    def test_existing_local_image(self, tmp_path):
        """Relative image references resolve against the HTML directory."""
        (tmp_path / "images").mkdir()
        (tmp_path / "images" / "diagram.png").write_bytes(b"png")
        html_path = write_html(
            tmp_path / "page.html", body='<img src="images/diagram.png">'
        )

        report = inspect_html(html_path)

        assert report.local_assets == [tmp_path / "images" / "diagram.png"]
        assert report.missing_assets == []

    def test_missing_local_image(self, tmp_path):
        """Local images that do not exist are reported as missing."""
        html_path = write_html(tmp_path / "page.html", body='<img src="ddd.png">')

        report = inspect_html(html_path)

        assert report.missing_assets == [tmp_path / "ddd.png"]

    def test_stylesheet_link(self, tmp_path):
        """Local stylesheet links count as assets."""
        html_path = write_html(
            tmp_path / "page.html",
            head='<link rel="stylesheet" href="style.css">',
        )

        report = inspect_html(html_path)

        assert report.missing_assets == [tmp_path / "style.css"]

    def test_file_url(self, tmp_path):
        """file:// URLs are treated as local paths."""
        asset = tmp_path / "logo.png"
        asset.write_bytes(b"png")
        html_path = write_html(
            tmp_path / "page.html", body=f'<img src="{asset.as_uri()}">'
        )

        report = inspect_html(html_path)

        assert report.local_assets == [asset]
        assert report.missing_assets == []

    def test_ignores_remote_and_inline_references(self, tmp_path):
        """Remote URLs, data URIs and fragments are not local assets."""
        html_path = write_html(
            tmp_path / "page.html",
            head='<link rel="stylesheet" href="https://example.com/style.css">',
            body=(
                '<img src="//cdn.example.com/a.png">'
                '<img src="data:image/png;base64,AAAA">'
                '<link href="#section">'
                "<img>"
            ),
        )

        report = inspect_html(html_path)

        assert report.local_assets == []
        assert report.missing_assets == []

    def test_duplicate_references_reported_once(self, tmp_path):
        """The same asset referenced twice is listed once."""
        html_path = write_html(
            tmp_path / "page.html",
            body='<img src="a.png"><img src="a.png">',
        )

        report = inspect_html(html_path)

        assert report.missing_assets == [tmp_path / "a.png"]
