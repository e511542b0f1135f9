# src/extension_bump/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- applies per-run CLI overrides (--root, --dry-run),
- parses the requested version and resolves every path into a BumpState.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import Settings, get_settings
from ..core.state import BumpState
from ..core.version import parse_version

logger = logging.getLogger(__name__)


def create_bump_state(
    requested_version: str,
    *,
    root: str | Path | None = None,
    dry_run: bool = False,
    settings: Settings | None = None,
) -> BumpState:
    """
    Build the BumpState for one run.

    Keeping settings injectable makes the tool easier to test.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    root_dir = Path(root) if root is not None else settings.root_dir
    requested = parse_version(requested_version)

    state = BumpState(
        manifest_path=root_dir / settings.manifest_file,
        tasks_dir=root_dir / settings.tasks_dir,
        task_file=settings.task_file,
        json_indent=settings.json_indent,
        requested=requested,
        dry_run=dry_run,
    )
    logger.debug("Bump state: %s", state)
    return state
