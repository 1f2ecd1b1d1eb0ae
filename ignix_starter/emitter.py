"""
Static Emitter: one write operation per starter artifact
========================================================
Each emit_* function takes the target root, (over)writes exactly one fixed
file and returns its path. No merging, no conditionals: running an emitter
twice produces byte-identical output.

Source artifacts (component, page, stylesheet) first ensure the source tree
(src/components, src/pages, src/styles, dist), so any emitter can run on its
own, in any order, or concurrently with the others.

OSError from mkdir or write propagates to the caller.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Union

from . import templates
from .fs import dump_json, ensure_dir, write_json, write_text

logger = logging.getLogger(__name__)

SOURCE_DIRS: tuple[str, ...] = ("src/components", "src/pages", "src/styles", "dist")

ArtifactKind = Literal["json", "text"]


@dataclass(frozen=True)
class StaticArtifact:
    """A fixed-content file: relative path plus a dict (JSON) or str (text) body."""

    name: str
    path: str
    content: Union[dict[str, Any], str]
    needs_source_tree: bool = False

    @property
    def kind(self) -> ArtifactKind:
        return "json" if isinstance(self.content, dict) else "text"

    def render(self) -> str:
        """Exact text that ends up on disk."""
        if self.kind == "json":
            return dump_json(self.content)
        return self.content


TSCONFIG = StaticArtifact("tsconfig", "tsconfig.json", templates.TSCONFIG)
TAILWIND = StaticArtifact("tailwind", "tailwind.config.js", templates.TAILWIND_CONFIG)
POSTCSS = StaticArtifact("postcss", "postcss.config.js", templates.POSTCSS_CONFIG)
ESLINT = StaticArtifact("eslint", ".eslintrc.json", templates.ESLINT_CONFIG)
IGNIX = StaticArtifact("ignix", "ignix.config.js", templates.IGNIX_CONFIG)
UI_SHELL = StaticArtifact(
    "ui-shell", "src/components/UiShell.tsx", templates.UI_SHELL, needs_source_tree=True
)
HOME_PAGE = StaticArtifact(
    "home-page", "src/pages/index.tsx", templates.HOME_PAGE, needs_source_tree=True
)
STYLES = StaticArtifact(
    "styles", "src/styles/index.css", templates.GLOBAL_STYLES, needs_source_tree=True
)
GITIGNORE = StaticArtifact("gitignore", ".gitignore", templates.GITIGNORE)
README = StaticArtifact("readme", "README.md", templates.README)

# Registry in write order; keys are the names accepted by Scaffolder(skip=...)
STATIC_ARTIFACTS: dict[str, StaticArtifact] = {
    a.name: a
    for a in (
        TSCONFIG, TAILWIND, POSTCSS, ESLINT, IGNIX,
        UI_SHELL, HOME_PAGE, STYLES,
        GITIGNORE, README,
    )
}


def ensure_source_tree(root: str | Path) -> list[Path]:
    """Create src/components, src/pages, src/styles and dist under root."""
    root = Path(root)
    return [ensure_dir(root / rel) for rel in SOURCE_DIRS]


def emit(artifact: StaticArtifact, root: str | Path) -> Path:
    """Write a single static artifact under root and return the written path."""
    root = ensure_dir(root)
    if artifact.needs_source_tree:
        ensure_source_tree(root)
    dest = root / artifact.path
    if artifact.kind == "json":
        write_json(dest, artifact.content)
    else:
        write_text(dest, artifact.content)
    return dest


def emit_tsconfig(root: str | Path) -> Path:
    return emit(TSCONFIG, root)


def emit_tailwind_config(root: str | Path) -> Path:
    return emit(TAILWIND, root)


def emit_postcss_config(root: str | Path) -> Path:
    return emit(POSTCSS, root)


def emit_eslint_config(root: str | Path) -> Path:
    return emit(ESLINT, root)


def emit_ignix_config(root: str | Path) -> Path:
    return emit(IGNIX, root)


def emit_ui_shell(root: str | Path) -> Path:
    return emit(UI_SHELL, root)


def emit_home_page(root: str | Path) -> Path:
    return emit(HOME_PAGE, root)


def emit_global_styles(root: str | Path) -> Path:
    return emit(STYLES, root)


def emit_src_structure(root: str | Path) -> list[Path]:
    """Source tree plus the three example sources in one call."""
    written = [emit(a, root) for a in (UI_SHELL, HOME_PAGE, STYLES)]
    logger.debug("Source structure ready under %s", Path(root) / "src")
    return written


def emit_gitignore(root: str | Path) -> Path:
    return emit(GITIGNORE, root)


def emit_readme(root: str | Path) -> Path:
    return emit(README, root)
