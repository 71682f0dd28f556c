"""Inspection of the intermediate HTML rendering."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from urllib.parse import unquote, urlparse

from lxml import html as lxml_html

logger = logging.getLogger(__name__)

# Elements whose attribute may point at a local asset the PDF renderer loads.
ASSET_ATTRIBUTES = [
    ("img", "src"),
    ("link", "href"),
    ("script", "src"),
]


@dataclass
class HTMLReport:
    """What the PDF stage will see when it loads an HTML file.

    Attributes:
        title: Text of the <title> element, or None if absent
        local_assets: Local files referenced by the document, resolved
        missing_assets: Subset of local_assets that do not exist on disk
    """

    title: str | None = None
    local_assets: list[Path] = field(default_factory=list)
    missing_assets: list[Path] = field(default_factory=list)


def inspect_html(html_path: Path) -> HTMLReport:
    """Parse an HTML file and report its title and local asset references.

    Relative references are resolved against the HTML file's directory;
    remote URLs, data URIs and fragment links are ignored.

    Args:
        html_path: HTML file to inspect

    Returns:
        HTMLReport for the file
    """
    tree = lxml_html.parse(str(html_path))
    root = tree.getroot()

    report = HTMLReport()
    if root is None:
        return report

    title = root.findtext(".//title")
    if title is not None:
        report.title = title.strip()

    base_dir = html_path.parent
    for tag, attribute in ASSET_ATTRIBUTES:
        for element in root.iter(tag):
            asset = _local_asset_path(element.get(attribute), base_dir)
            if asset is None or asset in report.local_assets:
                continue
            report.local_assets.append(asset)
            if not asset.exists():
                report.missing_assets.append(asset)

    logger.debug(
        f"Inspected {html_path.name}: title={report.title!r}, "
        f"{len(report.local_assets)} local assets"
    )
    return report


def _local_asset_path(reference: str | None, base_dir: Path) -> Path | None:
    """Resolve an attribute value to a local file path, if it is one."""
    if not reference:
        return None

    reference = reference.strip()
    if not reference or reference.startswith("#"):
        return None

    parsed = urlparse(reference)
    if parsed.scheme == "file":
        return Path(unquote(parsed.path))
    if parsed.scheme or parsed.netloc:
        return None

    path = Path(unquote(parsed.path))
    if not path.is_absolute():
        path = base_dir / path
    return path
