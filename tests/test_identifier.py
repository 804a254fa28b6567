"""Tests for typed identifiers."""

from __future__ import annotations

import pytest

from typed_fetch.exceptions import DecodeError
from typed_fetch.identifier import Identifier
from typed_fetch.resources import DocumentID, UserID


def test_identifier_exposes_wrapped_value() -> None:
    assert UserID(42).value == 42
    assert DocumentID("myid").value == "myid"


def test_identifiers_equal_iff_values_equal() -> None:
    assert UserID(1) == UserID(1)
    assert UserID(1) != UserID(2)
    assert hash(UserID(7)) == hash(UserID(7))
    assert len({UserID(3), UserID(3), UserID(4)}) == 2


def test_identifier_is_immutable() -> None:
    ident = UserID(1)
    with pytest.raises(AttributeError):
        ident.value = 2  # type: ignore[misc]


def test_identifier_rejects_wrong_primitive_type() -> None:
    with pytest.raises(TypeError):
        UserID("1")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        DocumentID(1)  # type: ignore[arg-type]


def test_identifier_rejects_bool_for_int() -> None:
    with pytest.raises(TypeError):
        UserID(True)


def test_unpinned_identifier_accepts_any_hashable() -> None:
    assert Identifier(("a", 1)).value == ("a", 1)
    with pytest.raises(TypeError):
        Identifier(["not", "hashable"])  # type: ignore[arg-type]


def test_identifier_str_is_canonical_form() -> None:
    assert str(UserID(42)) == "42"
    assert str(DocumentID("myid")) == "myid"


def test_identifier_encode_decode() -> None:
    assert UserID(5).encode() == 5
    assert UserID.decode(5) == UserID(5)
    assert DocumentID.decode("x") == DocumentID("x")


def test_identifier_decode_wrong_type_raises_decode_error() -> None:
    with pytest.raises(DecodeError):
        UserID.decode("5")


def test_unpinned_identifier_rejects_bool() -> None:
    with pytest.raises(TypeError, match="non-bool"):
        Identifier(True)
