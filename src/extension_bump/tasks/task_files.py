# src/extension_bump/tasks/task_files.py

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from ..core.json_files import load_json, write_json
from ..core.version import TaskDescriptorError, Version
from .task_models import TaskDescriptor

logger = logging.getLogger(__name__)


def find_task_descriptors(
    tasks_dir: str | Path,
    task_file: str = "task.json",
) -> list[TaskDescriptor]:
    """
    Collect every task.json under tasks_dir.

    A task directory with its own task.json is a single-version task; its
    subdirectories are not searched. Otherwise each subdirectory holding a
    task.json is one release of that task.
    """
    tasks_dir = Path(tasks_dir)
    if not tasks_dir.is_dir():
        raise TaskDescriptorError(f"Tasks directory not found: {tasks_dir}")

    out: list[TaskDescriptor] = []
    for task_dir in sorted(tasks_dir.iterdir(), key=lambda p: p.name):
        if not task_dir.is_dir():
            continue

        direct = task_dir / task_file
        if direct.is_file():
            out.append(TaskDescriptor(task_name=task_dir.name, path=direct))
            continue

        for release_dir in sorted(task_dir.iterdir(), key=lambda p: p.name):
            nested = release_dir / task_file
            if release_dir.is_dir() and nested.is_file():
                out.append(
                    TaskDescriptor(
                        task_name=task_dir.name,
                        path=nested,
                        release_dir=release_dir.name,
                    )
                )

    logger.debug("Found %d task descriptors under %s", len(out), tasks_dir)
    return out


def _current_major(descriptor: TaskDescriptor, data: dict[str, Any]) -> int:
    version = data.get("version")
    if not isinstance(version, dict):
        raise TaskDescriptorError(f"{descriptor.path}: missing 'version' object")
    major = version.get("Major")
    # Some descriptors store the numbers as strings ("Major": "1").
    if isinstance(major, str) and major.strip().isdigit():
        major = int(major)
    if isinstance(major, bool) or not isinstance(major, int):
        raise TaskDescriptorError(f"{descriptor.path}: 'version.Major' must be an integer, got {major!r}")
    return major


def update_task_descriptor(
    descriptor: TaskDescriptor,
    requested: Version,
    *,
    indent: int = 4,
    dry_run: bool = False,
) -> dict[str, int]:
    """
    Rewrite one task.json: Major stays as it is, Minor/Patch come from `requested`.
    Returns the new version object.
    """
    try:
        data = load_json(descriptor.path)
    except ValueError as e:
        raise TaskDescriptorError(f"{descriptor.path}: not a JSON object ({e})") from e

    major = _current_major(descriptor, data)
    new_version = {"Major": major, "Minor": requested.minor, "Patch": requested.patch}

    logger.info(
        "Updating version of task %s to X.%d.%d",
        descriptor.label,
        requested.minor,
        requested.patch,
    )
    data["version"] = new_version

    if not dry_run:
        write_json(descriptor.path, data, indent=indent)
    return new_version


def update_tasks_version(
    tasks_dir: str | Path,
    requested: Version,
    *,
    task_file: str = "task.json",
    indent: int = 4,
    dry_run: bool = False,
) -> list[TaskDescriptor]:
    """Update every descriptor under tasks_dir; returns once all of them are written."""
    descriptors = find_task_descriptors(tasks_dir, task_file)
    if not descriptors:
        logger.warning("No %s files found under %s", task_file, tasks_dir)

    for descriptor in descriptors:
        update_task_descriptor(descriptor, requested, indent=indent, dry_run=dry_run)
    return descriptors
