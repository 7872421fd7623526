from __future__ import annotations

import os
from pathlib import Path

import pytest

from date_check.sources import InputAccessError, discover_documents, iter_annotations, read_document
from date_check.types import Annotation, YearMonth


def test_discover_documents_recursive_and_sorted(tmp_path: Path) -> None:
    (tmp_path / "b.md").write_text("", encoding="utf-8")
    (tmp_path / "a-b").mkdir()
    (tmp_path / "a-b" / "z.md").write_text("", encoding="utf-8")
    (tmp_path / "a" / "deep").mkdir(parents=True)
    (tmp_path / "a" / "deep" / "z.md").write_text("", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("as of May 2000", encoding="utf-8")
    (tmp_path / "dir.md").mkdir()

    found = discover_documents(tmp_path)
    assert [p.relative_to(tmp_path).as_posix() for p in found] == ["a/deep/z.md", "a-b/z.md", "b.md"]


def test_discover_documents_custom_pattern(tmp_path: Path) -> None:
    (tmp_path / "x.md").write_text("", encoding="utf-8")
    (tmp_path / "y.txt").write_text("", encoding="utf-8")
    assert discover_documents(tmp_path, "*.txt") == [tmp_path / "y.txt"]


def test_discover_documents_missing_root(tmp_path: Path) -> None:
    with pytest.raises(InputAccessError, match="not found"):
        discover_documents(tmp_path / "nope")


def test_discover_documents_root_is_file(tmp_path: Path) -> None:
    f = tmp_path / "f.md"
    f.write_text("", encoding="utf-8")
    with pytest.raises(InputAccessError, match="not a directory"):
        discover_documents(f)


def test_read_document_rejects_invalid_utf8(tmp_path: Path) -> None:
    p = tmp_path / "bad.md"
    p.write_bytes(b"as of May 2000 \xff\xfe")
    with pytest.raises(InputAccessError, match="bad.md"):
        read_document(p)


def test_read_document_missing(tmp_path: Path) -> None:
    with pytest.raises(InputAccessError, match="gone.md"):
        read_document(tmp_path / "gone.md")


def test_iter_annotations_skips_documents_without_dates() -> None:
    texts = {Path("a.md"): "nothing", Path("b.md"): "x\nas of Jan 2020\n"}
    out = list(iter_annotations(list(texts), read=texts.__getitem__))
    assert out == [(Path("b.md"), [Annotation(2, YearMonth(2020, 1))])]


def test_broken_symlink_is_discovered_and_fails_to_read(tmp_path: Path) -> None:
    (tmp_path / "a.md").write_text("as of Jan 2000\n", encoding="utf-8")
    os.symlink(tmp_path / "missing-target.md", tmp_path / "b.md")

    found = discover_documents(tmp_path)
    assert found == [tmp_path / "a.md", tmp_path / "b.md"]
    with pytest.raises(InputAccessError, match="b.md"):
        read_document(found[1])


def test_read_document_keeps_lone_carriage_return(tmp_path: Path) -> None:
    p = tmp_path / "cr.md"
    p.write_bytes(b"one\rtwo\nas of May 2020\n")
    text = read_document(p)
    assert text == "one\rtwo\nas of May 2020\n"
    assert list(iter_annotations([p])) == [(p, [Annotation(2, YearMonth(2020, 5))])]
