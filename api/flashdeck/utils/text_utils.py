"""
Text utility functions.
"""
from typing import List


# Tried in order; the first one that yields a front and a back wins
CARD_LINE_SEPARATORS = ['|', '\t', ',']


def split_card_line(line: str) -> List[str]:
    """
    Split one line of bulk-import text into trimmed parts.

    Tries '|' first, then a tab, then a comma, stopping at the first
    separator that produces at least two parts. A comma inside the back of a
    '|'-separated line is therefore preserved.

    Args:
        line: A single line of import text

    Returns:
        Trimmed parts; a single-element list if no separator applies
    """
    parts = [line.strip()]
    for separator in CARD_LINE_SEPARATORS:
        parts = [part.strip() for part in line.split(separator)]
        if len(parts) >= 2:
            return parts
    return parts
