# src/extension_bump/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class TaskDescriptor:
    """
    One task.json on disk.

    Layouts:
    - tasks/<task_name>/task.json                 (release_dir is None)
    - tasks/<task_name>/<release_dir>/task.json   (multi-version task)
    """

    task_name: str
    path: Path
    release_dir: str | None = None

    @property
    def label(self) -> str:
        if self.release_dir is None:
            return self.task_name
        return f"{self.task_name}, version: {self.release_dir}"
