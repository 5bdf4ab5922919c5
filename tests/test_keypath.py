"""
Tests for splitting path strings into segments.
"""
import pytest

from dotdata.core.errors import InvalidPathError, format_path
from dotdata.core.keypath import parse_path

@pytest.mark.parametrize("path, expected", [
    ("a", ("a",)),
    ("a.b.c", ("a", "b", "c")),
    ("a/b/c", ("a", "b", "c")),
    ("a.b/c", ("a", "b", "c")),
    ("with space.x", ("with space", "x")),
])
def test_parse_path(path, expected):
    assert parse_path(path) == expected

def test_empty_path_rejected():
    with pytest.raises(InvalidPathError, match="Path cannot be an empty string"):
        parse_path("")

@pytest.mark.parametrize("path", ["a..b", ".a", "a/", "a./b", "/", "."])
def test_empty_segment_rejected(path):
    with pytest.raises(InvalidPathError, match="segments cannot be empty"):
        parse_path(path)

def test_non_string_rejected():
    with pytest.raises(InvalidPathError, match="must be a string"):
        parse_path(None)

def test_invalid_path_is_value_error():
    """Callers catching ValueError still see bad paths."""
    with pytest.raises(ValueError):
        parse_path("")

def test_format_path():
    assert format_path(("a", "b", "c")) == "a » b » c"

def test_empty_segment_message_shows_path_as_given():
    with pytest.raises(InvalidPathError) as exc:
        parse_path("a/")
    assert "'a/'" in str(exc.value)
    assert exc.value.path == ("a", "")
