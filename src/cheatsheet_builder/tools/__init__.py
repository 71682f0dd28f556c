"""Wrappers for the external programs the build shells out to."""

from .apt import AptGet
from .exceptions import (
    InputNotFoundError,
    OutputError,
    ToolError,
    ToolFailedError,
    ToolNotFoundError,
)
from .pandoc import Pandoc
from .tool import Tool
from .wkhtmltopdf import Wkhtmltopdf

__all__ = [
    "Tool",
    "AptGet",
    "Pandoc",
    "Wkhtmltopdf",
    "ToolError",
    "ToolNotFoundError",
    "ToolFailedError",
    "InputNotFoundError",
    "OutputError",
]
