"""
Scaffolder: writes the whole universal starter into a target root
=================================================================
Usage:
    report = Scaffolder().scaffold(Path("./my-ui"))
    report = await Scaffolder(skip=["readme"]).scaffold_async(Path("./my-ui"))

package.json is always merged first and on its own. The static artifacts
touch disjoint files, so scaffold_async() runs them concurrently in worker
threads. The first OSError propagates; files written before it stay on disk.
"""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Optional

from .emitter import STATIC_ARTIFACTS, StaticArtifact, emit
from .manifest import MANIFEST_FILENAME, write_manifest

logger = logging.getLogger(__name__)

MANIFEST_ARTIFACT = "package"

ARTIFACT_NAMES: tuple[str, ...] = (MANIFEST_ARTIFACT, *STATIC_ARTIFACTS)


@dataclass
class ScaffoldReport:
    """What a scaffold run wrote."""

    root: Path
    written: list[str] = field(default_factory=list)     # relative paths, write order
    skipped: list[str] = field(default_factory=list)     # artifact names
    manifest: Optional[dict[str, Any]] = None


def validate_artifact_names(names: Iterable[str]) -> tuple[str, ...]:
    """Return names as a tuple; ValueError on anything not in ARTIFACT_NAMES."""
    names = tuple(names)
    unknown = [n for n in names if n not in ARTIFACT_NAMES]
    if unknown:
        raise ValueError(
            f"Unknown artifact name(s): {unknown}. Valid values: {list(ARTIFACT_NAMES)}"
        )
    return names


class Scaffolder:
    """
    Runs the manifest merger and every static emitter for one target root.

    skip: artifact names to leave out (see ARTIFACT_NAMES).
    """

    def __init__(self, skip: Iterable[str] = ()) -> None:
        self._skip = frozenset(validate_artifact_names(skip))

    @property
    def skip(self) -> frozenset[str]:
        return self._skip

    def _selected(self) -> list[StaticArtifact]:
        return [a for name, a in STATIC_ARTIFACTS.items() if name not in self._skip]

    def _new_report(self, root: Path) -> ScaffoldReport:
        return ScaffoldReport(
            root=root,
            skipped=[n for n in ARTIFACT_NAMES if n in self._skip],
        )

    def scaffold(self, root: str | Path) -> ScaffoldReport:
        """Write every selected artifact under root, one after another."""
        root = Path(root)
        report = self._new_report(root)

        if MANIFEST_ARTIFACT not in self._skip:
            report.manifest = write_manifest(root)
            report.written.append(MANIFEST_FILENAME)

        for artifact in self._selected():
            emit(artifact, root)
            report.written.append(artifact.path)

        self._log_done(report)
        return report

    async def scaffold_async(self, root: str | Path) -> ScaffoldReport:
        """
        Async variant of scaffold().

        The manifest merge is awaited before anything else starts; the static
        emitters are then offloaded via asyncio.to_thread() and gathered.
        """
        root = Path(root)
        report = self._new_report(root)

        if MANIFEST_ARTIFACT not in self._skip:
            report.manifest = await asyncio.to_thread(write_manifest, root)
            report.written.append(MANIFEST_FILENAME)

        selected = self._selected()
        await asyncio.gather(*(asyncio.to_thread(emit, a, root) for a in selected))
        report.written.extend(a.path for a in selected)

        self._log_done(report)
        return report

    @staticmethod
    def _log_done(report: ScaffoldReport) -> None:
        logger.info(
            "Universal starter ready in %s: %d file(s) written%s",
            report.root, len(report.written),
            f", skipped {', '.join(report.skipped)}" if report.skipped else "",
        )


def scaffold_starter(root: str | Path, skip: Iterable[str] = ()) -> ScaffoldReport:
    """Convenience wrapper: Scaffolder(skip).scaffold(root)."""
    return Scaffolder(skip=skip).scaffold(root)
