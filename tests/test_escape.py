"""Tests for regex escaping of scope names."""

import re

import pytest

from scopedash.escape import escape_pattern, exact_match_pattern

NAMES = [
    "AWS Dev",
    "Preprod AWS Accounts Group",
    "prod (us-east-1)",
    "a.b*c+d?",
    "[x]{1,2}",
    "path/to\\dir",
    "cost: <= 50% off!",
    "a|b#c",
    "tab\there",
    "^$",
    "",
]


@pytest.mark.parametrize("name", NAMES)
def test_exact_pattern_matches_only_the_literal(name):
    pattern = re.compile(exact_match_pattern(name))

    assert pattern.fullmatch(name)
    assert pattern.fullmatch(name + "x") is None
    assert pattern.fullmatch("x" + name) is None


@pytest.mark.parametrize("char", list(".*+?()[]{}^$|/\\-!<=:#,"))
def test_special_characters_get_single_backslash(char):
    assert escape_pattern(f"a{char}b") == f"a\\{char}b"


def test_whitespace_is_escaped():
    assert escape_pattern("AWS Dev") == "AWS\\ Dev"
    assert escape_pattern("a\tb") == "a\\\tb"


def test_plain_text_unchanged():
    assert escape_pattern("EAAzure2024") == "EAAzure2024"


def test_exact_match_pattern_is_anchored():
    assert exact_match_pattern("AWS Dev") == r"^AWS\ Dev$"
