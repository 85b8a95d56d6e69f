"""
Text helpers shared by the parser and layout selection.

Label limits are user-facing ("how many characters does this look like"), so
lengths are measured in extended grapheme clusters rather than code points.
"""

from typing import List

import regex

_GRAPHEME = regex.compile(r"\X")

# Unicode White_Space. str.split() also breaks on U+001C..U+001F, which are
# not whitespace here.
WHITE_SPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def display_length(text: str) -> int:
    """Return the number of user-perceived characters in ``text``."""
    return sum(1 for _ in _GRAPHEME.finditer(text))


def tokenize_line(line: str) -> List[str]:
    """
    Split a line into at most three whitespace-separated fields.

    The first two runs of whitespace separate fields; everything after the
    second run is kept as a single third field, so edge labels may contain
    spaces.

    Args:
        line: A single input line.

    Returns:
        Between zero and three fields. Blank lines give an empty list.
    """
    rest = line.strip(WHITE_SPACE)
    fields: List[str] = []
    while rest and len(fields) < 2:
        end = 0
        while end < len(rest) and rest[end] not in WHITE_SPACE:
            end += 1
        fields.append(rest[:end])
        rest = rest[end:].lstrip(WHITE_SPACE)
    if rest:
        fields.append(rest)
    return fields


def number_of_lines(text: str) -> int:
    """Count lines by splitting on newlines, blank lines included."""
    return len(text.split("\n"))
