"""CLI entry point for hlavi-tui."""

import argparse
from pathlib import Path

from . import __version__
from .config import Settings
from .logging import setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="hlavi-tui",
        description="Terminal kanban viewer for hlavi boards",
    )
    parser.add_argument(
        "--root",
        type=Path,
        default=None,
        help="Path to project root containing the board directory (default: current directory)",
    )
    parser.add_argument(
        "--data-dir",
        default=None,
        help="Board directory name inside the project root (default: .hlavi)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (-v for INFO, -vv for DEBUG)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Path to write logs to file (recommended while the TUI is running)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> Settings:
    """Merge CLI flags over environment-derived settings."""
    settings_kwargs: dict = {}
    if args.root:
        settings_kwargs["project_root"] = args.root
    if args.data_dir:
        settings_kwargs["data_dir"] = args.data_dir
    if args.verbose:
        settings_kwargs["verbose"] = args.verbose
    if args.log_file:
        settings_kwargs["log_file"] = args.log_file
    return Settings(**settings_kwargs)


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    settings = build_settings(parse_args(argv))

    setup_logging(settings.verbose, settings.log_file)

    # Import here to keep --help and --version fast
    from .app import run

    raise SystemExit(run(settings))


if __name__ == "__main__":
    main()
