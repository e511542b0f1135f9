# src/extension_bump/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .version import Version


@dataclass(frozen=True, slots=True)
class BumpState:
    """Everything one run needs: resolved paths, output options and the target version."""

    manifest_path: Path
    tasks_dir: Path
    task_file: str
    json_indent: int
    requested: Version
    dry_run: bool = False
