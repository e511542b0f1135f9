# tests/test_json_files.py

from __future__ import annotations

import json
import os
import stat
import sys
from pathlib import Path

import pytest

from extension_bump.core import json_files
from extension_bump.core.json_files import load_json, write_json


def test_write_json_uses_indent_and_trailing_newline(tmp_path: Path) -> None:
    path = tmp_path / "task.json"
    write_json(path, {"version": {"Major": 1}})

    assert path.read_text("utf-8") == '{\n    "version": {\n        "Major": 1\n    }\n}\n'
    assert load_json(path) == {"version": {"Major": 1}}


def test_write_json_failure_removes_tmp_and_keeps_original(tmp_path: Path, monkeypatch) -> None:
    path = tmp_path / "task.json"
    path.write_text('{"version": {"Major": 1}}', "utf-8")

    def _fail(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr(json_files.os, "replace", _fail)

    with pytest.raises(OSError, match="disk full"):
        write_json(path, {"version": {"Major": 2}})

    assert not (tmp_path / "task.json.tmp").exists()
    assert json.loads(path.read_text("utf-8")) == {"version": {"Major": 1}}


@pytest.mark.skipif(sys.platform == "win32", reason="symlinks need privileges on Windows")
def test_write_json_keeps_symlink(tmp_path: Path) -> None:
    real = tmp_path / "shared" / "task.json"
    real.parent.mkdir()
    real.write_text('{"version": {"Major": 1}}', "utf-8")
    link = tmp_path / "task.json"
    link.symlink_to(real)

    write_json(link, {"version": {"Major": 3}})

    assert link.is_symlink()
    assert load_json(real) == {"version": {"Major": 3}}
    assert not list(tmp_path.rglob("*.tmp"))


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX permission bits")
def test_write_json_keeps_file_mode(tmp_path: Path) -> None:
    path = tmp_path / "task.json"
    path.write_text("{}", "utf-8")
    os.chmod(path, 0o640)

    write_json(path, {"version": {"Major": 1}})

    assert stat.S_IMODE(path.stat().st_mode) == 0o640
