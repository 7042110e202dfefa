"""Word boundary rules shared by word motion and word kills."""

from __future__ import annotations

WORD_BOUNDARIES = frozenset(" \t.,;:!?()[]{}/\\|-_=+*&%$#@~`'\"<>")


def is_word_boundary(ch: str) -> bool:
    return ch in WORD_BOUNDARIES


def word_end(line: str, col: int) -> int:
    """Column just past the word starting at ``col`` and its trailing separators."""

    while col < len(line) and not is_word_boundary(line[col]):
        col += 1
    while col < len(line) and is_word_boundary(line[col]):
        col += 1
    return col


def word_start(line: str, col: int) -> int:
    """Column where the word before ``col`` begins, skipping separators first."""

    if col <= 0:
        return 0
    col -= 1
    while col > 0 and is_word_boundary(line[col]):
        col -= 1
    while col > 0 and not is_word_boundary(line[col - 1]):
        col -= 1
    return col


__all__ = ["WORD_BOUNDARIES", "is_word_boundary", "word_end", "word_start"]
