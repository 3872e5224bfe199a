"""Quote-aware scanner for layout detection, separators and brace blocks."""

import re
from typing import List
from .types import BalancedBlock, SeparatorLocation, TextLayout


NEWLINE_RE = re.compile(r"[\r\n]")

OPENING_BRACKETS = "{[("
CLOSING_BRACKETS = "}])"
QUOTES = "'\"`"
LINE_SEPARATORS = ",;"


def detect_layout(text: str) -> TextLayout:
    """
    Detect whether the trimmed text spans more than one line.

    Args:
        text: Text to classify

    Returns:
        TextLayout.MULTI_LINE if a line break remains after trimming,
        TextLayout.SINGLE_LINE otherwise (including empty text)
    """
    if NEWLINE_RE.search(text.strip()):
        return TextLayout.MULTI_LINE
    return TextLayout.SINGLE_LINE


def find_separator_indexes(text: str) -> List[SeparatorLocation]:
    """
    Find every index where a line break belongs when expanding text.

    Brackets, commas and semicolons inside quoted strings are ignored. Quotes
    are matched by character only, so an escaped quote still ends a string.

    Args:
        text: Single-line text to scan

    Returns:
        SeparatorLocation list in ascending index order, one per index
    """
    separators = []
    in_string = False
    current_quote = ""
    last = len(text) - 1

    for i, ch in enumerate(text):
        if in_string:
            # Quotes are never break points, closing ones included
            if ch == current_quote:
                in_string = False
            continue
        if ch in QUOTES:
            in_string = True
            current_quote = ch
            continue

        next_ch = text[i + 1] if i < last else None

        is_separator = (
            ch in OPENING_BRACKETS
            or (ch in CLOSING_BRACKETS and next_ch is not None
                and next_ch not in LINE_SEPARATORS)
            or (next_ch is not None and next_ch in CLOSING_BRACKETS)
            or ch in LINE_SEPARATORS
        )

        if is_separator:
            separators.append(SeparatorLocation(index=i, is_comma=ch == ","))

    return separators


def find_balanced_blocks(text: str) -> List[BalancedBlock]:
    """
    Find top-level ``{ ... }`` blocks.

    Nested braces are absorbed into the enclosing block and braces inside
    quoted strings are ignored. An opening brace that is never closed yields
    no block.

    Args:
        text: Text to scan

    Returns:
        Non-overlapping BalancedBlock list ordered by start offset
    """
    blocks = []
    depth = 0
    block_start = -1
    in_string = False
    current_quote = ""

    for i, ch in enumerate(text):
        if ch in QUOTES:
            if not in_string:
                in_string = True
                current_quote = ch
                continue
            if ch == current_quote:
                in_string = False
                continue
        if in_string:
            continue

        if ch == "{":
            if depth == 0:
                block_start = i
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0 and block_start != -1:
                blocks.append(BalancedBlock(start=block_start, end=i))
                block_start = -1

    return blocks
