"""Unit tests for core/utils value and tag helpers"""

import pytest

from mdprep.core.utils.tags import join_tags, tag_list
from mdprep.core.utils.urls import is_absolute_url
from mdprep.core.utils.values import stringify


@pytest.mark.parametrize("value,expected", [
    (None, "null"),
    (True, "true"),
    (False, "false"),
    (3, "3"),
    (3.0, "3"),
    (2.5, "2.5"),
    (["a", "b"], "a,b"),
    ("text", "text"),
])
def test_stringify(value, expected):
    assert stringify(value) == expected


@pytest.mark.parametrize("tags,expected", [
    (["a", "b"], "a, b"),
    ("a,b", "a,b"),
    (None, ""),
])
def test_join_tags(tags, expected):
    assert join_tags(tags) == expected


def test_tag_list_string_and_list():
    assert tag_list(" Python, WEB ,,") == ["python", "web"]
    assert tag_list([" Go ", "Rust"]) == ["go", "rust"]


@pytest.mark.parametrize("url,expected", [
    ("https://x/y", True),
    ("HTTP://x", True),
    ("//cdn/x.png", False),
    ("/root.png", False),
    ("ftp://x", False),
    ("", False),
    (None, False),
])
def test_is_absolute_url(url, expected):
    assert is_absolute_url(url) is expected
