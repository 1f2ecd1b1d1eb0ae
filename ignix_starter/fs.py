"""
File helpers: the small filesystem contract the scaffolder relies on
====================================================================
read optional JSON, write JSON / text, ensure a directory exists.

Write helpers let OSError propagate unchanged; only read_json_optional()
reports problems through its return value.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger(__name__)

JSON_INDENT = 2


class JsonReadError(Exception):
    """An existing JSON file could not be read or decoded."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


def ensure_dir(path: str | Path) -> Path:
    """Create path (and parents) if missing. Safe to call concurrently."""
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def read_json_optional(path: str | Path) -> Optional[Any]:
    """
    Return the decoded JSON at path, or None when the file does not exist.

    Raises JsonReadError when the file exists but cannot be read or parsed.
    """
    path = Path(path)
    if not path.exists():
        return None
    try:
        text = path.read_text(encoding="utf-8-sig")  # tolerate a leading BOM
    except (OSError, UnicodeDecodeError) as exc:
        raise JsonReadError(path, str(exc)) from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise JsonReadError(path, f"invalid JSON ({exc.msg} at line {exc.lineno})") from exc


def dump_json(data: Any) -> str:
    """Serialise data the way every JSON artifact is written: 2-space indent + newline."""
    return json.dumps(data, indent=JSON_INDENT, ensure_ascii=False) + "\n"


def write_json(path: str | Path, data: Any) -> Path:
    path = Path(path)
    path.write_text(dump_json(data), encoding="utf-8")
    logger.debug("Wrote %s", path)
    return path


def write_text(path: str | Path, content: str) -> Path:
    path = Path(path)
    path.write_text(content, encoding="utf-8")
    logger.debug("Wrote %s (%d chars)", path, len(content))
    return path
