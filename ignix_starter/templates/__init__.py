"""Fixed file contents for the universal starter.

JSON artifacts are kept as dicts and serialised at write time; everything
else is the exact text written to disk.
"""
from __future__ import annotations

from .configs import (
    ESLINT_CONFIG, IGNIX_CONFIG, POSTCSS_CONFIG, TAILWIND_CONFIG, TSCONFIG,
)
from .project import GITIGNORE, README
from .sources import GLOBAL_STYLES, HOME_PAGE, UI_SHELL

__all__ = [
    "TSCONFIG", "ESLINT_CONFIG", "TAILWIND_CONFIG", "POSTCSS_CONFIG", "IGNIX_CONFIG",
    "UI_SHELL", "HOME_PAGE", "GLOBAL_STYLES",
    "GITIGNORE", "README",
]
