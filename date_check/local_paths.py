from __future__ import annotations

import os
from pathlib import Path


def _normalized(p: Path, resolve_symlinks: bool) -> Path:
    p = p.expanduser()
    if resolve_symlinks:
        return p.resolve()
    # lexical, but with ".." collapsed so root/../x is not under root
    return Path(os.path.normpath(p.absolute()))


def is_under(path: Path, root: Path, *, resolve_symlinks: bool = False) -> bool:
    """Return True if path is root or lies below it.

    By default compares absolute, normalized (lexical) paths, so a symlinked
    document found while walking root still counts as under root. With
    resolve_symlinks=True, compares fully-resolved paths instead.
    """
    return _normalized(path, resolve_symlinks).is_relative_to(_normalized(root, resolve_symlinks))


def relative_posix(path: Path, root: Path) -> str:
    """Render path relative to root with forward slashes (e.g. "src/guide/intro.md")."""
    p = _normalized(path, False)
    r = _normalized(root, False)
    if not p.is_relative_to(r):
        raise ValueError(f"Path must be under {r}: {p}")
    return p.relative_to(r).as_posix()
