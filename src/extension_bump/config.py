# src/extension_bump/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

- One Settings object for the whole tool.
- CLI flags (--root, ...) override these values per run, see cli/bootstrap.py.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "EXTBUMP"

DEFAULT_MANIFEST_FILE = "vss-extension.json"
DEFAULT_TASKS_DIR = "tasks"
DEFAULT_TASK_FILE = "task.json"
DEFAULT_JSON_INDENT = 4


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path | None) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- Layout of the extension ----
    root_dir: Path
    manifest_file: str
    tasks_dir: str
    task_file: str

    # ---- Output ----
    json_indent: int

    # ---- Logging ----
    log_level: str
    log_dir: Path | None

    @staticmethod
    def from_env() -> "Settings":
        root_dir = _env_path(_k("ROOT_DIR"), Path(".")) or Path(".")

        manifest_file = _env(_k("MANIFEST_FILE"), DEFAULT_MANIFEST_FILE).strip() or DEFAULT_MANIFEST_FILE
        tasks_dir = _env(_k("TASKS_DIR"), DEFAULT_TASKS_DIR).strip() or DEFAULT_TASKS_DIR
        task_file = _env(_k("TASK_FILE"), DEFAULT_TASK_FILE).strip() or DEFAULT_TASK_FILE

        json_indent = _env_int(_k("JSON_INDENT"), DEFAULT_JSON_INDENT)
        if json_indent < 0:
            json_indent = DEFAULT_JSON_INDENT

        log_level = _env(_k("LOG_LEVEL"), "INFO")
        log_dir = _env_path(_k("LOG_DIR"), None)

        return Settings(
            root_dir=root_dir,
            manifest_file=manifest_file,
            tasks_dir=tasks_dir,
            task_file=task_file,
            json_indent=json_indent,
            log_level=log_level,
            log_dir=log_dir,
        )


def get_settings() -> Settings:
    return Settings.from_env()
