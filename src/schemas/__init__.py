"""Schema definitions for the cheat-sheet build."""

from .build import (
    DEFAULT_HTML,
    DEFAULT_PDF,
    DEFAULT_SOURCE,
    DEFAULT_TITLE,
    Artifact,
    BuildConfig,
    BuildPaths,
    BuildResult,
    ToolStatus,
)

__all__ = [
    "DEFAULT_HTML",
    "DEFAULT_PDF",
    "DEFAULT_SOURCE",
    "DEFAULT_TITLE",
    "Artifact",
    "BuildConfig",
    "BuildPaths",
    "BuildResult",
    "ToolStatus",
]
