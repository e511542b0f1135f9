# src/extension_bump/core/json_files.py

from __future__ import annotations

import contextlib
import json
import logging
import os
import shutil
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def load_json(path: str | Path) -> dict[str, Any]:
    path = Path(path)
    data = json.loads(path.read_text("utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object at top level")
    return data


def dump_json(data: dict[str, Any], *, indent: int = 4) -> str:
    return json.dumps(data, ensure_ascii=False, indent=indent) + "\n"


def write_json(path: str | Path, data: dict[str, Any], *, indent: int = 4) -> None:
    """
    Rewrite `path` via a sibling .tmp file + os.replace (no half-written files).

    Symlinks are followed, so the link stays a link and its target is rewritten.
    The target's permission bits carry over to the new file.
    """
    target = Path(path).resolve()
    tmp = target.with_name(target.name + ".tmp")
    try:
        tmp.write_text(dump_json(data, indent=indent), "utf-8")
        if target.exists():
            shutil.copymode(target, tmp)
        os.replace(tmp, target)
    except BaseException:
        with contextlib.suppress(OSError):
            tmp.unlink()
        raise
    logger.debug("Wrote %s", target)
