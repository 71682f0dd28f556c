"""Pytest fixtures for cheatsheet-builder tests.

The external converters are replaced by small shell scripts so the build can
run end to end without pandoc or wkhtmltopdf installed.
"""

import os
import stat

import fitz  # PyMuPDF
import pytest

from schemas.build import DEFAULT_SOURCE

SAMPLE_MARKDOWN = """\
# Entity Framework Core

## Loading related data

```csharp
var blogs = context.Blogs
    .Include(b => b.Posts)
    .ToList();
```

## LINQ

```csharp
var names = people.Where(p => p.Age > 18).Select(p => p.Name);
```
"""

FAKE_PANDOC = """\
#!/bin/sh
printf '%s\\n' "$@" > "$0.args"
out=""; title=""; src=""
while [ $# -gt 0 ]; do
  case "$1" in
    -o) out="$2"; shift 2;;
    --metadata) title="${2#title=}"; shift 2;;
    -s) shift;;
    *) src="$1"; shift;;
  esac
done
if [ ! -f "$src" ]; then
  echo "pandoc: $src: openBinaryFile: does not exist (No such file or directory)" >&2
  exit 1
fi
printf '<!DOCTYPE html>\\n<html><head><title>%s</title></head><body><p>converted</p></body></html>\\n' "$title" > "$out"
"""

FAKE_WKHTMLTOPDF = """\
#!/bin/sh
printf '%s\\n' "$@" > "$0.args"
for arg; do html="$out"; out="$arg"; done
if [ ! -f "$html" ]; then
  echo "Exit with code 1 due to network error: ContentNotFoundError" >&2
  exit 1
fi
cp "{sample_pdf}" "$out"
"""


def write_script(path, content):
    """Write an executable shell script and return its path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


@pytest.fixture
def sample_pdf(tmp_path):
    """A real one-page PDF created with PyMuPDF."""
    pdf_path = tmp_path / "fixtures" / "sample.pdf"
    pdf_path.parent.mkdir(parents=True)
    doc = fitz.open()
    page = doc.new_page()
    page.insert_text((72, 72), "Cheatsheet")
    doc.save(str(pdf_path))
    doc.close()
    return pdf_path


@pytest.fixture
def bin_dir(tmp_path):
    """Directory holding fake executables."""
    path = tmp_path / "bin"
    path.mkdir()
    return path


@pytest.fixture
def make_script(bin_dir):
    """Factory for extra fake executables in the bin directory."""

    def _make(name, content):
        return write_script(bin_dir / name, content)

    return _make


@pytest.fixture
def fake_pandoc(bin_dir):
    """Fake pandoc that writes a minimal HTML page carrying the title metadata."""
    return write_script(bin_dir / "pandoc", FAKE_PANDOC)


@pytest.fixture
def fake_wkhtmltopdf(bin_dir, sample_pdf):
    """Fake wkhtmltopdf that copies the sample PDF to its output path."""
    return write_script(
        bin_dir / "wkhtmltopdf",
        FAKE_WKHTMLTOPDF.replace("{sample_pdf}", str(sample_pdf)),
    )


@pytest.fixture
def fake_tools_on_path(monkeypatch, bin_dir, fake_pandoc, fake_wkhtmltopdf):
    """Put the fake converters first on PATH."""
    monkeypatch.setenv("PATH", f"{bin_dir}{os.pathsep}{os.environ.get('PATH', '')}")
    return bin_dir


@pytest.fixture
def failing_tool(bin_dir):
    """Executable that reports an error and exits with status 100."""
    return write_script(
        bin_dir / "failing-tool",
        "#!/bin/sh\necho 'E: Unable to locate package wkhtmltopdf' >&2\nexit 100\n",
    )


@pytest.fixture
def workdir(tmp_path):
    """Working directory containing the cheat-sheet source document."""
    path = tmp_path / "work"
    path.mkdir()
    (path / DEFAULT_SOURCE).write_text(SAMPLE_MARKDOWN)
    return path


@pytest.fixture
def empty_workdir(tmp_path):
    """Working directory without a source document."""
    path = tmp_path / "empty"
    path.mkdir()
    return path
