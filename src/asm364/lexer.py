from __future__ import annotations
from typing import List

COMMENT_CHAR = "#"

def is_skip(line: str) -> bool:
    """True for blank lines and lines starting with '#' (after leading whitespace)."""
    s = line.strip()
    return not s or s[0] == COMMENT_CHAR

def tokenize(line: str) -> List[str]:
    """Lower-case the line and split it on whitespace.

    Skipped lines give an empty list. Only whole-line comments exist, so a
    '#' further along the line is an ordinary token.
    """
    if is_skip(line):
        return []
    return line.strip().lower().split()

def split_mnemonic_operands(tokens: List[str]):
    if not tokens:
        return "", []
    return tokens[0], tokens[1:]
