"""Core type definitions for Line Layout."""

from dataclasses import dataclass, field
from enum import Enum
from collections.abc import Mapping
from typing import Any, List, Optional


class TextLayout(Enum):
    """Enumeration of text layouts."""
    SINGLE_LINE = "single-line"
    MULTI_LINE = "multi-line"


class Command(Enum):
    """Enumeration of layout commands."""
    TOGGLE = "toggle"
    COMPACT = "compact"


class ErrorType(Enum):
    """Enumeration of error types."""
    EMPTY = "empty"
    SIZE = "size"
    OPTIONS = "options"
    COMMAND = "command"


@dataclass(frozen=True)
class SeparatorLocation:
    """A position at which a line break is inserted when expanding text."""
    index: int
    is_comma: bool


@dataclass(frozen=True)
class BalancedBlock:
    """A top-level ``{ ... }`` region; both offsets are inclusive."""
    start: int
    end: int


class TransformError(Exception):
    """Custom exception for misuse of the layout commands."""

    def __init__(self, message: str, error_type: ErrorType, context: Optional[Any] = None):
        super().__init__(message)
        self.error_type = error_type
        self.context = context


# Keys accepted in keybinding-style option arguments
OPTION_ARG_KEYS = ("isCommaOnNewLine", "is_comma_on_new_line")

COMMA_PLACEMENTS = ("same-line", "new-line")


@dataclass(frozen=True)
class TransformOptions:
    """
    Options that control how text is expanded to multiple lines.

    When ``is_comma_on_new_line`` is set, the line break goes before a comma so
    the new line starts with it; otherwise the comma stays at the end of the
    old line.
    """
    is_comma_on_new_line: bool = False

    @classmethod
    def from_args(cls, args: Optional[Mapping[str, Any]]) -> Optional['TransformOptions']:
        """
        Create options from keybinding-style arguments.

        Args:
            args: Mapping such as ``{"isCommaOnNewLine": true}`` or None

        Returns:
            TransformOptions, or None when no arguments were supplied

        Raises:
            TransformError: If args is not a mapping
        """
        if args is None:
            return None

        if not isinstance(args, Mapping):
            raise TransformError(
                f"Option arguments must be a mapping, got {type(args).__name__}",
                ErrorType.OPTIONS,
                context={"args": args}
            )

        for key in OPTION_ARG_KEYS:
            if key in args:
                return cls(is_comma_on_new_line=bool(args[key]))

        return cls()

    @classmethod
    def from_comma_placement(cls, placement: str) -> 'TransformOptions':
        """Create options from a ``same-line``/``new-line`` comma placement."""
        if placement not in COMMA_PLACEMENTS:
            raise TransformError(
                f"Unknown comma placement '{placement}', "
                f"expected one of: {', '.join(COMMA_PLACEMENTS)}",
                ErrorType.OPTIONS,
                context={"placement": placement}
            )
        return cls(is_comma_on_new_line=placement == "new-line")


@dataclass
class ValidationError:
    """Validation error details."""
    type: ErrorType
    message: str
    location: Optional[str] = None


@dataclass
class ValidationResult:
    """Result of input validation."""
    is_valid: bool
    errors: List[ValidationError]
    warnings: List[str]


@dataclass
class TransformResult:
    """Result of a layout command; ``text`` is the untouched input on failure."""
    success: bool
    text: str
    command: Command
    layout: Optional[TextLayout] = None
    changed: bool = False
    errors: Optional[List[str]] = None
    error_type: Optional[ErrorType] = None
    warnings: List[str] = field(default_factory=list)
