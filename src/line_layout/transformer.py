"""Layout transformations built on the scanner."""

import re
from typing import Optional
from .parser import detect_layout, find_balanced_blocks, find_separator_indexes
from .types import TextLayout, TransformOptions


LINE_BREAK = "\n"

STRIP_RE = re.compile(r"[\r\n\t]")
BREAK_RUN_RE = re.compile(r"[\r\n\t]+")
SPACE_RUN_RE = re.compile(r"\s{2,}")
OPEN_BRACE_RE = re.compile(r"\{\s+")
CLOSE_BRACE_RE = re.compile(r"\s+\}")
INDENT_RE = re.compile(r"[ \t]*$")


def to_single_line(text: str) -> str:
    """Trim text and remove every carriage return, line feed and tab."""
    return STRIP_RE.sub("", text.strip())


def to_multi_line(text: str, options: Optional[TransformOptions] = None) -> str:
    """
    Insert line breaks at separator positions (brackets, commas, semicolons).

    Args:
        text: Single-line text
        options: Comma placement; defaults to commas at the end of the line

    Returns:
        Multi-line text
    """
    if options is None:
        options = TransformOptions()

    breaks = {location.index: location for location in find_separator_indexes(text)}
    pieces = []

    for i, ch in enumerate(text):
        location = breaks.get(i)
        if location is None:
            pieces.append(ch)
        elif options.is_comma_on_new_line and location.is_comma:
            pieces.append(LINE_BREAK + ch)
        else:
            pieces.append(ch + LINE_BREAK)

    return "".join(pieces)


def toggle_line_layout(text: str, options: Optional[TransformOptions] = None) -> str:
    """
    Toggle text between single-line and multi-line layout.

    Empty or whitespace-only text is returned unchanged.
    """
    trimmed = text.strip()
    if not trimmed:
        return text

    if detect_layout(trimmed) is TextLayout.MULTI_LINE:
        return to_single_line(trimmed)
    return to_multi_line(trimmed, options)


def _compact_block(raw: str) -> str:
    """Collapse one block to a single line with single spaces inside its braces."""
    compacted = BREAK_RUN_RE.sub(" ", raw)
    compacted = SPACE_RUN_RE.sub(" ", compacted)
    compacted = OPEN_BRACE_RE.sub("{ ", compacted)
    return CLOSE_BRACE_RE.sub(" }", compacted)


def compact_blocks(text: str) -> str:
    """
    Compact every top-level ``{ ... }`` block onto its own line.

    Turns::

        {
          "name": "foo",
          "regexp": "*"
        },
        {
          "name": "bar",
          "regexp": "*"
        },

    into::

        { "name": "foo", "regexp": "*" },
        { "name": "bar", "regexp": "*" },

    The indentation in front of the first block is applied to every line.
    Content between blocks is kept after the block it follows, except that a
    leading comma swallows the rest of that content. Without any block the
    whole text is collapsed with ``to_single_line``.

    Args:
        text: Text holding one or more brace blocks

    Returns:
        One line per block, joined with line breaks
    """
    blocks = find_balanced_blocks(text)

    if not blocks:
        return to_single_line(text)

    indent = INDENT_RE.search(text[:blocks[0].start]).group(0)
    lines = []

    for i, block in enumerate(blocks):
        compacted = _compact_block(text[block.start:block.end + 1])

        next_start = blocks[i + 1].start if i + 1 < len(blocks) else len(text)
        trailing = text[block.end + 1:next_start].strip()

        if trailing.startswith(","):
            suffix = ","
        elif trailing:
            suffix = " " + trailing
        else:
            suffix = ""

        lines.append(indent + compacted + suffix)

    return LINE_BREAK.join(lines)
