"""Shell wildcard matching tests."""

import pytest

from filekit import File, MatchFlag
from filekit.matching import match


@pytest.mark.parametrize(
    ("pattern", "text", "expected"),
    [
        ("*.jpg", "the_cat.jpg", True),
        ("*.jpg", "the_cat.png", False),
        ("the_?at.*", "the_cat.jpg", True),
        ("file[0-9].txt", "file3.txt", True),
        ("file[!0-9].txt", "file3.txt", False),
        ("*", "dir/file", True),
        ("*", ".hidden", True),
    ],
)
def test_default_matching(pattern: str, text: str, expected: bool) -> None:
    assert match(pattern, text) is expected


def test_matching_is_case_sensitive_unless_casefold() -> None:
    assert not match("*.JPG", "the_cat.jpg")
    assert match("*.JPG", "the_cat.jpg", MatchFlag.CASEFOLD)


def test_pathname_keeps_wildcards_inside_segments() -> None:
    assert not match("*", "dir/file", MatchFlag.PATHNAME)
    assert match("*/*", "dir/file", MatchFlag.PATHNAME)
    assert not match("dir/?", "dir/ab", MatchFlag.PATHNAME)


def test_period_requires_literal_leading_dot() -> None:
    assert not match("*", ".hidden", MatchFlag.PERIOD)
    assert match(".*", ".hidden", MatchFlag.PERIOD)
    assert match("dir/.*", "dir/.x", MatchFlag.PATHNAME | MatchFlag.PERIOD)
    assert not match("dir/*", "dir/.x", MatchFlag.PATHNAME | MatchFlag.PERIOD)
    assert match("dir/*", "dir/.x", MatchFlag.PERIOD)


def test_backslash_escapes_unless_noescape() -> None:
    assert match(r"\*", "*")
    assert not match(r"\*", "abc")
    assert match(r"a\?c", "a?c")
    assert match(r"\*", r"\abc", MatchFlag.NOESCAPE)
    assert not match(r"\*", "*", MatchFlag.NOESCAPE)


def test_file_match_delegates() -> None:
    assert File.match("*.txt", "notes.txt", MatchFlag.NONE)
    assert File.match("*.TXT", "notes.txt", int(MatchFlag.CASEFOLD))


def test_flag_values_follow_fnmatch_constants() -> None:
    assert MatchFlag.PATHNAME == 1
    assert MatchFlag.NOESCAPE == 2
    assert not match("*", "a/b", 1)
    assert match(r"\*", r"\abc", 2)
