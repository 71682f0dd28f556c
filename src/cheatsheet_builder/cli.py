"""Command-line interface for cheatsheet-builder."""

import argparse
import logging
import sys
from pathlib import Path

from cheatsheet_builder.builder import CheatsheetBuilder
from cheatsheet_builder.provisioning import Provisioner
from cheatsheet_builder.tools import ToolError
from schemas.build import BuildConfig

DEFAULT_DIRECTORY = Path(".")
DEFAULT_RENDERER = "wkhtmltopdf"


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def setup(args: argparse.Namespace) -> int:
    """Execute the setup command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, the package manager's status on failure)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        Provisioner().install()
        return 0

    except ToolError as e:
        logger.error(f"Failed to install build tools: {e.message}")
        return e.returncode

    except Exception as e:
        logger.error(f"Failed to install build tools: {e}")
        return 1


def build_pdf(args: argparse.Namespace) -> int:
    """Execute the pdf command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, the failing tool's status on failure)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    directory = args.directory.resolve()
    if not directory.is_dir():
        logger.error(f"Directory not found: {directory}")
        return 1

    config = BuildConfig(renderer=args.renderer)

    try:
        builder = CheatsheetBuilder(directory, config)
        result = builder.build()

        logger.info(f"Built PDF: {result.pdf.path}")
        logger.info(f"  Title: {result.title}")
        logger.info(f"  Pages: {result.pdf.page_count}")
        logger.info(f"  HTML: {result.html.path}")

        if result.warnings:
            logger.warning(f"  Warnings: {len(result.warnings)}")
            for warning in result.warnings:
                logger.warning(f"    - {warning}")

        return 0

    except ToolError as e:
        logger.error(f"Failed to build PDF: {e.message}")
        return e.returncode

    except Exception as e:
        logger.error(f"Failed to build PDF: {e}")
        return 1


def check(args: argparse.Namespace) -> int:
    """Execute the check command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 when every tool is installed, 1 otherwise)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    statuses = Provisioner().check()
    for status in statuses:
        if status.available:
            logger.info(f"{status.name}: {status.path}")
        else:
            logger.warning(f"{status.name}: not found (install package '{status.package}')")

    missing = [s.name for s in statuses if not s.available]
    if missing:
        logger.error(f"Missing tools: {', '.join(missing)}; run 'cheatsheet-builder setup'")
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="cheatsheet-builder",
        description="Render the cheat sheet from markdown to HTML and PDF",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    setup_parser = subparsers.add_parser(
        "setup",
        help="Install pandoc and wkhtmltopdf",
        description="Install the external document converters (pandoc, wkhtmltopdf) with apt-get.",
    )
    setup_parser.set_defaults(func=setup)

    pdf_parser = subparsers.add_parser(
        "pdf",
        help="Render the cheat sheet to PDF",
        description="Convert PosCheatSheet.md to PosCheatSheet.html with pandoc, then to PosCheatSheet.pdf.",
    )
    pdf_parser.add_argument(
        "--directory",
        type=Path,
        default=DEFAULT_DIRECTORY,
        help="Directory containing the source document (default: current directory)",
    )
    pdf_parser.add_argument(
        "--renderer",
        choices=["wkhtmltopdf", "weasyprint"],
        default=DEFAULT_RENDERER,
        help=f"HTML-to-PDF renderer (default: {DEFAULT_RENDERER})",
    )
    pdf_parser.set_defaults(func=build_pdf)

    check_parser = subparsers.add_parser(
        "check",
        help="Report whether the external converters are installed",
        description="Look up pandoc and wkhtmltopdf on PATH without changing anything.",
    )
    check_parser.set_defaults(func=check)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
