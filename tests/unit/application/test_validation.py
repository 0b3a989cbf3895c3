"""
Name: Required-field Contract Tests
"""

from datetime import date

import pytest

from leavedesk.application.validation import first_missing, is_blank

pytestmark = pytest.mark.unit


@pytest.mark.parametrize("value", [None, "", "   ", "\t\n", 0])
def test_blank_values(value):
    assert is_blank(value) is True


@pytest.mark.parametrize("value", ["x", " x ", 1, -3, date(2024, 1, 1), False])
def test_present_values(value):
    assert is_blank(value) is False


def test_first_missing_follows_declaration_order():
    values = {"a": "ok", "b": "", "c": None}
    assert first_missing(values, ("a", "b", "c")) == "b"
    assert first_missing(values, ("c", "b")) == "c"


def test_first_missing_treats_absent_key_as_missing():
    assert first_missing({"a": "ok"}, ("a", "z")) == "z"


def test_first_missing_none_when_complete():
    assert first_missing({"a": "ok", "b": 2}, ("a", "b")) is None
