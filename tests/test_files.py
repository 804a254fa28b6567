"""Tests for capability-based membership of file-like values."""

from __future__ import annotations

from typed_fetch.files import File, SpreadSheet, TextFile, contains


def test_file_variants_satisfy_capability() -> None:
    assert isinstance(TextFile(path="/a"), File)
    assert isinstance(SpreadSheet(path="/b"), File)


def test_is_equal_to_same_variant_and_fields() -> None:
    password = TextFile(path="/foo/password", content="...")

    assert password.is_equal_to(TextFile(path="/foo/password", content="..."))
    assert not password.is_equal_to(TextFile(path="/foo/password", content="other"))


def test_is_equal_to_different_variant_is_false() -> None:
    assert not TextFile(path="/a").is_equal_to(SpreadSheet(path="/a"))
    assert not SpreadSheet(path="/a").is_equal_to(TextFile(path="/a"))


def test_is_equal_to_unrelated_value_never_raises() -> None:
    assert not TextFile(path="/a").is_equal_to(None)
    assert not TextFile(path="/a").is_equal_to("/a")


def test_contains_uses_exact_variant() -> None:
    password = TextFile(path="/foo/password", content="...")
    budget = SpreadSheet(path="/bar/budget/", cells={"A1": "$52"})
    docs: list[File] = [password, budget]

    assert contains(docs, TextFile(path="/foo/password", content="..."))
    assert contains(docs, SpreadSheet(path="/bar/budget/", cells={"A1": "$52"}))
    assert not contains(docs, SpreadSheet(path="/foo/password"))
    assert not contains(docs, TextFile(path="/bar/budget/"))


def test_contains_empty_collection() -> None:
    assert not contains([], TextFile(path="/a"))
