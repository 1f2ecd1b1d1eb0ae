"""
Starter File Loader: read scaffold settings from a YAML file
============================================================
Schema (only `target` is required):

    target: ./my-ui            # directory to scaffold into
    skip: [readme, gitignore]  # artifact names to leave out, default none
    verbose: false             # DEBUG logging, default false

Artifact names: package, tsconfig, tailwind, postcss, eslint, ignix,
ui-shell, home-page, styles, gitignore, readme.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .scaffolder import ScaffoldReport, Scaffolder, validate_artifact_names


@dataclass
class StarterFileResult:
    """Everything extracted from a YAML starter file."""
    target: Path
    skip: tuple[str, ...] = field(default_factory=tuple)
    verbose: bool = False

    def scaffolder(self) -> Scaffolder:
        return Scaffolder(skip=self.skip)

    def run(self) -> ScaffoldReport:
        """Configure logging from `verbose`, then scaffold into `target`."""
        setup_logging(self.verbose)
        return self.scaffolder().scaffold(self.target)


def load_starter_file(path: str | Path) -> StarterFileResult:
    """
    Parse a YAML starter file.

    Raises
    ------
    FileNotFoundError : file doesn't exist
    ValueError        : required fields missing or values invalid
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Starter file not found: {path}")

    with open(path, encoding="utf-8") as f:
        raw: Any = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"'{path}': expected a mapping at the top level")

    target_raw = raw.get("target")
    target = str(target_raw).strip() if target_raw is not None else ""
    if not target:
        raise ValueError(f"'{path}': 'target' field is required")

    target_path = Path(target)
    if not target_path.is_absolute():
        # relative targets are resolved against the starter file's directory
        target_path = path.parent / target_path

    skip_raw = raw.get("skip") or []
    if not isinstance(skip_raw, list):
        raise ValueError(f"'{path}': 'skip' must be a list of artifact names")
    try:
        skip = validate_artifact_names(str(s) for s in skip_raw)
    except ValueError as exc:
        raise ValueError(f"'{path}': {exc}") from exc

    return StarterFileResult(
        target=target_path,
        skip=skip,
        verbose=bool(raw.get("verbose", False)),
    )


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
        force=True,  # re-apply even if already configured
    )
