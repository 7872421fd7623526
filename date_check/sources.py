"""Filesystem collaborators: find the documents under a root and read them as text."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterator

from .parsers import extract_annotations
from .types import Annotation


class InputAccessError(RuntimeError):
    """The root or one of its documents could not be found, read, or decoded."""


def discover_documents(root: Path, pattern: str = "**/*.md") -> list[Path]:
    """Non-directory paths under root matching pattern, sorted by path components.

    Broken symlinks are kept so that reading them fails loudly.
    """
    if not root.exists():
        raise InputAccessError(f"Root directory not found: {root}")
    if not root.is_dir():
        raise InputAccessError(f"Root is not a directory: {root}")
    return sorted((p for p in root.glob(pattern) if not p.is_dir()), key=lambda p: p.parts)


def read_document(path: Path) -> str:
    try:
        # bytes, not read_text: line numbers count "\n" only, a lone "\r" stays as-is
        return path.read_bytes().decode("utf-8")
    except UnicodeDecodeError as e:
        raise InputAccessError(f"Not valid UTF-8 text: {path} ({e.reason} at byte {e.start})") from e
    except OSError as e:
        raise InputAccessError(f"Cannot read {path}: {e.strerror or e}") from e


def iter_annotations(
    paths: list[Path],
    read: Callable[[Path], str] = read_document,
) -> Iterator[tuple[Path, list[Annotation]]]:
    """Yield (path, annotations) for each path that has at least one annotation.

    Reads one document at a time; the first read failure propagates.
    """
    for p in paths:
        found = extract_annotations(read(p))
        if found:
            yield p, found
