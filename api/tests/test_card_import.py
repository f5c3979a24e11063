"""Tests for bulk-import line parsing."""

from __future__ import annotations

import pytest

from flashdeck.services.card_service import parse_card_lines
from flashdeck.utils.text_utils import split_card_line


@pytest.mark.parametrize(
    "line, expected",
    [
        ("a | b", ["a", "b"]),
        ("a\tb", ["a", "b"]),
        ("a, b", ["a", "b"]),
        ("a | b, c", ["a", "b, c"]),
        ("a\tb, c", ["a", "b, c"]),
        ("a | b | c", ["a", "b", "c"]),
        ("just text", ["just text"]),
    ],
)
def test_split_card_line_prefers_pipe_then_tab_then_comma(line, expected):
    assert split_card_line(line) == expected


def test_parse_card_lines_skips_incomplete_lines():
    text = "front | back\n\n   \nonly front |\n| only back\nx, y, z\r\nlast\tone"

    assert parse_card_lines(text) == [
        ("front", "back"),
        ("x", "y"),
        ("last", "one"),
    ]


def test_parse_card_lines_empty_text():
    assert parse_card_lines("") == []
