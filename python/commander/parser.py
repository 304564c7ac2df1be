"""Command line tokenizer for commander."""

from __future__ import annotations

from typing import List, Optional

QUOTES = frozenset("\"'")


def split_command(line: Optional[str]) -> List[str]:
    """Split a command line into tokens.

    Whitespace separates tokens unless a quote span is open.  Both ``"`` and
    ``'`` flip the same in-quotes flag, so ``'a" b'`` splits into ``a`` and
    ``b``.  Quote characters never reach the output and an
    unterminated quote simply runs to the end of the line.
    """
    if not line:
        return []
    tokens: List[str] = []
    current: List[str] = []
    in_quotes = False
    for char in line:
        if char in QUOTES:
            in_quotes = not in_quotes
        elif char.isspace() and not in_quotes:
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(char)
    if current:
        tokens.append("".join(current))
    return tokens
