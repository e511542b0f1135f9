# src/extension_bump/cli/main.py

"""
CLI entrypoint.

Pipeline (strictly linear, stops at the first error):
parse args -> validate requested version against the manifest -> update every
task.json -> update vss-extension.json.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from ..cli.bootstrap import create_bump_state
from ..config import get_settings
from ..core.state import BumpState
from ..core.version import VersionBumpError, assert_bump
from ..logging_setup import setup_logging
from ..manifest.extension_manifest import read_manifest_version, update_extension_version
from ..tasks.task_files import update_tasks_version

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_REFUSED = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="extension-bump",
        description=(
            "Bump version of JFrog Extension. "
            "It bumps version in all task.json files and in vss-extension.json."
        ),
    )
    parser.add_argument(
        "-v",
        "--version",
        metavar="X.Y.Z",
        help="Version to set. Must be bigger than the current version. Format: X.Y.Z",
    )
    parser.add_argument(
        "--root",
        default=None,
        help="Extension root holding vss-extension.json and tasks/ (default: current directory).",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate and show what would change without writing any file.",
    )
    return parser


def run_bump(state: BumpState) -> None:
    current = read_manifest_version(state.manifest_path)
    kind = assert_bump(current, state.requested)
    logger.info("Bumping %s -> %s (%s release)", current, state.requested, kind)

    update_tasks_version(
        state.tasks_dir,
        state.requested,
        task_file=state.task_file,
        indent=state.json_indent,
        dry_run=state.dry_run,
    )
    update_extension_version(
        state.manifest_path,
        state.requested,
        indent=state.json_indent,
        dry_run=state.dry_run,
    )

    if state.dry_run:
        logger.info("Dry run: no files were modified.")


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.version:
        parser.print_help()
        return EXIT_USAGE

    settings = get_settings()
    console_level = getattr(logging, str(settings.log_level).upper(), logging.INFO)
    setup_logging(console_level=console_level, log_dir=settings.log_dir)

    try:
        state = create_bump_state(
            args.version,
            root=args.root,
            dry_run=args.dry_run,
            settings=settings,
        )
        run_bump(state)
    except VersionBumpError as e:
        logger.error("%s", e)
        return EXIT_REFUSED

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
