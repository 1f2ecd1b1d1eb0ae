"""
Manifest Merger: package.json defaults without clobbering user edits
====================================================================
Reads an optional existing package.json, overlays the starter's default
fields and writes the result back.

Precedence is explicit rather than a blind dict overlay:

  * every top-level key of the existing manifest survives, in its order
  * name / version / private / type: existing value wins, else default
  * scripts / dependencies / devDependencies: existing entries are kept as-is,
    default keys are appended only where missing

A value of None (JSON null) counts as missing. A manifest that cannot be read
or parsed is discarded with a warning and the defaults are written instead.
"""
from __future__ import annotations

import copy
import logging
from pathlib import Path
from typing import Any, Mapping

from .fs import JsonReadError, read_json_optional, write_json

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "package.json"

SCALAR_FIELDS = ("name", "version", "private", "type")
NESTED_FIELDS = ("scripts", "dependencies", "devDependencies")

DEFAULT_MANIFEST: dict[str, Any] = {
    "name": "ignix-universal-app",
    "version": "0.1.0",
    "private": True,
    "type": "module",
    "scripts": {
        "dev": 'echo "Plug your preferred framework dev server here (e.g. vite dev)"',
        "typecheck": "tsc --noEmit",
        "build:css": "tailwindcss -i ./src/styles/index.css -o ./dist/styles.css --minify",
        "build": "npm run typecheck && npm run build:css",
        "lint": 'eslint "src/**/*.{ts,tsx}" --max-warnings=0',
        "format": 'prettier --write "src/**/*.{ts,tsx,css,md}"',
    },
    "dependencies": {
        "react": "^18.3.1",
        "react-dom": "^18.3.1",
        "@mindfiredigital/ignix-ui": "^1.0.5",
        "clsx": "^2.1.1",
        "tailwind-merge": "^3.0.2",
    },
    "devDependencies": {
        "typescript": "^5.6.2",
        "@types/react": "^18.3.5",
        "@types/react-dom": "^18.3.0",
        "tailwindcss": "^3.4.14",
        "postcss": "^8.4.41",
        "autoprefixer": "^10.4.20",
        "eslint": "^9.11.1",
        "@typescript-eslint/parser": "^8.7.0",
        "@typescript-eslint/eslint-plugin": "^8.7.0",
        "prettier": "^3.3.3",
        "prettier-plugin-tailwindcss": "^0.6.6",
    },
}


def default_manifest() -> dict[str, Any]:
    """Fresh deep copy of DEFAULT_MANIFEST, safe to mutate."""
    return copy.deepcopy(DEFAULT_MANIFEST)


def merge_manifest(existing: Mapping[str, Any]) -> dict[str, Any]:
    """
    Merge existing manifest fields with the starter defaults.

    Pure function: neither argument nor DEFAULT_MANIFEST is modified.
    """
    merged: dict[str, Any] = copy.deepcopy(dict(existing))

    for key in SCALAR_FIELDS:
        if merged.get(key) is None:
            merged[key] = DEFAULT_MANIFEST[key]

    for key in NESTED_FIELDS:
        merged[key] = _merge_nested(key, merged.get(key), DEFAULT_MANIFEST[key])

    return merged


def _merge_nested(key: str, current: Any, defaults: Mapping[str, Any]) -> dict[str, Any]:
    if current is None:
        current = {}
    elif not isinstance(current, dict):
        logger.warning(
            "package.json field '%s' is not an object (%s); replacing it with defaults",
            key, type(current).__name__,
        )
        current = {}

    result = dict(current)
    for name, value in defaults.items():
        if result.get(name) is None:
            result[name] = value
    return result


def read_existing_manifest(root: str | Path) -> dict[str, Any]:
    """
    Load root/package.json for merging.

    Never raises for a missing or broken file: both cases yield {} so the
    merge falls back to the full default manifest.
    """
    path = Path(root) / MANIFEST_FILENAME
    try:
        data = read_json_optional(path)
    except JsonReadError as exc:
        logger.warning("Unable to parse %s (%s); generating a fresh one", path, exc.reason)
        return {}

    if data is None:
        logger.info("No package.json found; writing starter manifest")
        return {}
    if not isinstance(data, dict):
        logger.warning(
            "Unable to use %s: top-level JSON is %s, not an object; generating a fresh one",
            path, type(data).__name__,
        )
        return {}

    logger.info("Existing package.json found; merging starter scripts and dependencies")
    return data


def write_manifest(root: str | Path) -> dict[str, Any]:
    """
    Merge root/package.json with the defaults and write it back.

    Returns the document that was written. OSError from the write propagates.
    Concurrent calls for the same root race (last write wins); callers must
    serialise them.
    """
    root = Path(root)
    root.mkdir(parents=True, exist_ok=True)
    merged = merge_manifest(read_existing_manifest(root))
    write_json(root / MANIFEST_FILENAME, merged)
    return merged
