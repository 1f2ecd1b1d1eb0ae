"""
Ignix Universal Starter
=======================
Scaffolds a framework-agnostic React + TypeScript + Tailwind starter wired
for Ignix UI into a target directory.

Basic usage:
    from ignix_starter import scaffold_starter

    report = scaffold_starter("./my-ui")
    print(report.written)

Per-artifact usage:
    from ignix_starter import write_manifest, emit_tsconfig

    write_manifest("./my-ui")   # merges with an existing package.json
    emit_tsconfig("./my-ui")    # always overwrites

Concurrent usage:
    report = asyncio.run(Scaffolder().scaffold_async("./my-ui"))
"""

from .config import StarterFileResult, load_starter_file, setup_logging
from .emitter import (
    STATIC_ARTIFACTS, StaticArtifact,
    emit, emit_eslint_config, emit_gitignore, emit_global_styles, emit_home_page,
    emit_ignix_config, emit_postcss_config, emit_readme, emit_src_structure,
    emit_tailwind_config, emit_tsconfig, emit_ui_shell, ensure_source_tree,
)
from .manifest import (
    DEFAULT_MANIFEST, default_manifest, merge_manifest, read_existing_manifest,
    write_manifest,
)
from .scaffolder import ARTIFACT_NAMES, ScaffoldReport, Scaffolder, scaffold_starter

__all__ = [
    # ── Orchestration ────────────────────────────────────────────────────────
    "Scaffolder", "ScaffoldReport", "scaffold_starter", "ARTIFACT_NAMES",
    # ── Manifest merger ──────────────────────────────────────────────────────
    "DEFAULT_MANIFEST", "default_manifest", "merge_manifest",
    "read_existing_manifest", "write_manifest",
    # ── Static emitters ──────────────────────────────────────────────────────
    "STATIC_ARTIFACTS", "StaticArtifact", "emit", "ensure_source_tree",
    "emit_tsconfig", "emit_tailwind_config", "emit_postcss_config",
    "emit_eslint_config", "emit_ignix_config", "emit_ui_shell",
    "emit_home_page", "emit_global_styles", "emit_src_structure",
    "emit_gitignore", "emit_readme",
    # ── Configuration ────────────────────────────────────────────────────────
    "StarterFileResult", "load_starter_file", "setup_logging",
]
