# tests/conftest.py

from __future__ import annotations

import json
from pathlib import Path

import pytest

from extension_bump.config import Settings


def _write_json(path: Path, data: dict) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), "utf-8")
    return path


@pytest.fixture()
def extension_root(tmp_path: Path) -> Path:
    """
    Extension tree in tmp_path:
    - vss-extension.json at 2.3.5
    - tasks/ArtifactoryGenericUpload/task.json (single-version, Major 1)
    - tasks/ArtifactoryNpm/v1/task.json and v2/task.json (multi-version, Major 1 and 2)
    - tasks/Empty/ with no descriptor, tasks/README.md as a stray file
    """
    _write_json(
        tmp_path / "vss-extension.json",
        {
            "manifestVersion": 1,
            "id": "jfrog-artifactory-vsts-extension",
            "version": "2.3.5",
            "publisher": "JFrog",
        },
    )
    _write_json(
        tmp_path / "tasks" / "ArtifactoryGenericUpload" / "task.json",
        {
            "id": "a1",
            "name": "ArtifactoryGenericUpload",
            "version": {"Major": 1, "Minor": 3, "Patch": 5},
            "inputs": [{"name": "specSource", "type": "pickList"}],
        },
    )
    _write_json(
        tmp_path / "tasks" / "ArtifactoryNpm" / "v1" / "task.json",
        {"id": "n1", "name": "ArtifactoryNpm", "version": {"Major": 1, "Minor": 3, "Patch": 5}},
    )
    _write_json(
        tmp_path / "tasks" / "ArtifactoryNpm" / "v2" / "task.json",
        {"id": "n2", "name": "ArtifactoryNpm", "version": {"Major": 2, "Minor": 3, "Patch": 5}},
    )
    (tmp_path / "tasks" / "Empty").mkdir()
    (tmp_path / "tasks" / "README.md").write_text("tasks\n", "utf-8")
    return tmp_path


@pytest.fixture()
def settings(extension_root: Path) -> Settings:
    return Settings(
        root_dir=extension_root,
        manifest_file="vss-extension.json",
        tasks_dir="tasks",
        task_file="task.json",
        json_indent=4,
        log_level="INFO",
        log_dir=None,
    )
