"""
Line Layout - single-line/multi-line toggling for delimiter-separated text.

Collapses multi-line JSON-like objects, arrays and argument lists onto one
line, expands single-line ones at their brackets, commas and semicolons, and
compacts multi-line brace blocks to one block per line.
"""

__version__ = "1.0.0"

from .types import (
    BalancedBlock,
    Command,
    ErrorType,
    SeparatorLocation,
    TextLayout,
    TransformError,
    TransformOptions,
    TransformResult,
)
from .parser import detect_layout, find_balanced_blocks, find_separator_indexes
from .transformer import compact_blocks, to_multi_line, to_single_line, toggle_line_layout
from .layout_transformer import LayoutTransformer

__all__ = [
    "LayoutTransformer",
    "TextLayout",
    "Command",
    "ErrorType",
    "SeparatorLocation",
    "BalancedBlock",
    "TransformOptions",
    "TransformResult",
    "TransformError",
    "detect_layout",
    "find_separator_indexes",
    "find_balanced_blocks",
    "to_single_line",
    "to_multi_line",
    "toggle_line_layout",
    "compact_blocks",
]
