"""Tests for typed lookup checks."""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

import pytest

from tiny_cache.core.types import matches_type


@dataclass
class Point:
    x: int
    y: int


class Opaque:
    pass


@pytest.mark.parametrize(
    "value,type_,expected",
    [
        ("value", str, True),
        ("value", bool, False),
        (True, bool, True),
        (True, int, False),
        (1, bool, False),
        (1, int, True),
        (1.5, float, True),
        (1, float, True),
        (True, float, False),
        ([1, 2], List[float], True),
        (1, complex, True),
        (Point(1, 2), Point, True),
        (Opaque(), Opaque, True),
        ("value", Opaque, False),
        ("anything", Any, True),
        ([1, 2], list, True),
        ([1, 2], List[int], True),
        ([1, "2"], List[int], False),
        ({"a": 1}, Dict[str, int], True),
        ("x", Optional[str], True),
        (3, Union[str, int], True),
        (3.0, Union[str, int], False),
    ],
)
def test_matches_type(value, type_, expected):
    """Test type matching across plain classes and generics."""
    assert matches_type(value, type_) is expected


def test_generic_of_plain_class_checks_items():
    """Test generics whose items are classes without a schema."""
    assert matches_type([Opaque()], List[Opaque]) is True
    assert matches_type([1, 2], List[Opaque]) is False
    assert matches_type([Opaque(), "x"], List[Opaque]) is False
    assert matches_type((Opaque(),), List[Opaque]) is False


def test_optional_and_union_of_plain_class():
    """Test unions whose members are classes without a schema."""
    assert matches_type(Opaque(), Optional[Opaque]) is True
    assert matches_type(None, Optional[Opaque]) is True
    assert matches_type(Opaque(), Union[Opaque, str]) is True
    assert matches_type("x", Union[Opaque, str]) is True
    assert matches_type(3, Optional[Opaque]) is False
