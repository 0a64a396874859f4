"""Shell wildcard matching in the style of POSIX ``fnmatch(3)``."""

from __future__ import annotations

import fnmatch
from enum import IntFlag


class MatchFlag(IntFlag):
    """Flags altering how a pattern is matched.

    Attributes:
        NOESCAPE: Treat backslash as an ordinary character.
        PATHNAME: Wildcards and bracket expressions never match ``/``.
        PERIOD: A leading period must be matched by a literal period.
        CASEFOLD: Compare case-insensitively.
    """

    NONE = 0
    PATHNAME = 1
    NOESCAPE = 2
    PERIOD = 4
    CASEFOLD = 16


def match(pattern: str, text: str, flags: MatchFlag | int = MatchFlag.NONE) -> bool:
    """Return whether ``text`` matches the shell wildcard ``pattern``.

    Args:
        pattern: Pattern using ``*``, ``?`` and ``[...]`` wildcards.
        text: String to test.
        flags: Combination of :class:`MatchFlag` values.

    Returns:
        bool: True when the whole of ``text`` matches.
    """
    flags = MatchFlag(flags)
    if flags & MatchFlag.CASEFOLD:
        pattern = pattern.lower()
        text = text.lower()

    if flags & MatchFlag.PATHNAME:
        pattern_parts = pattern.split("/")
        text_parts = text.split("/")
        if len(pattern_parts) != len(text_parts):
            return False
        return all(
            _match_segment(p, t, flags) for p, t in zip(pattern_parts, text_parts)
        )

    return _match_segment(pattern, text, flags)


def _match_segment(pattern: str, text: str, flags: MatchFlag) -> bool:
    if flags & MatchFlag.PERIOD and text.startswith("."):
        if not _starts_with_literal_period(pattern, flags):
            return False
    if not flags & MatchFlag.NOESCAPE:
        pattern = _quote_escapes(pattern)
    return fnmatch.fnmatchcase(text, pattern)


def _starts_with_literal_period(pattern: str, flags: MatchFlag) -> bool:
    if pattern.startswith("."):
        return True
    return not flags & MatchFlag.NOESCAPE and pattern.startswith("\\.")


def _quote_escapes(pattern: str) -> str:
    # fnmatch has no escape character; a one-item bracket set matches literally.
    quoted: list[str] = []
    chars = iter(pattern)
    for char in chars:
        if char == "\\":
            escaped = next(chars, "\\")
            quoted.append(f"[{escaped}]" if escaped in "*?[" else escaped)
        else:
            quoted.append(char)
    return "".join(quoted)


__all__ = ["MatchFlag", "match"]
