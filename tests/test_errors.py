"""Tests for construction-time identifier errors."""

from __future__ import annotations

import pytest

from lintnames.errors import InvalidIdentifierFormat
from lintnames.names import make_package_path


def test_message_names_value_and_reason() -> None:
    err = InvalidIdentifierFormat("a..b", "empty component")
    assert str(err) == "Invalid identifier 'a..b': empty component"
    assert err.value == "a..b"
    assert err.reason == "empty component"


def test_raised_error_carries_offending_input() -> None:
    with pytest.raises(InvalidIdentifierFormat) as exc_info:
        make_package_path(".a")
    assert exc_info.value.value == ".a"
    assert "empty dot-separated" in exc_info.value.reason
