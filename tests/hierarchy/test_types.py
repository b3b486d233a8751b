"""Tests for the Record payload."""

import dataclasses

import pytest

from hierarchy import Displayable, Record


def test_records_are_equal_by_value():
    first = Record("Root", 1)
    second = Record("Root", 1)

    assert first is not second
    assert first == second
    assert hash(first) == hash(second)
    assert {first: "x"}[second] == "x"


def test_record_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        Record("A", 1).label = "B"


def test_display_fields():
    assert Record("QQ", 2).display_fields() == ("QQ", "2")


def test_record_satisfies_displayable():
    assert isinstance(Record("A", 1), Displayable)
