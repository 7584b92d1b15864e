"""Regex escaping for exact-name search criteria."""

from __future__ import annotations

import re

# Characters the search backend treats as regex syntax, plus whitespace.
_SPECIAL_CHARS = re.compile(r"[-\[\]{}()*+!<=:?./\\^$|#,\s]")


def escape_pattern(literal: str) -> str:
    """Backslash-escape every regex metacharacter and whitespace in ``literal``."""
    return _SPECIAL_CHARS.sub(lambda match: "\\" + match.group(0), literal)


def exact_match_pattern(literal: str) -> str:
    """Anchored pattern matching ``literal`` and nothing else."""
    return f"^{escape_pattern(literal)}$"


__all__ = ["escape_pattern", "exact_match_pattern"]
