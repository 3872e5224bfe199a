"""Input and option validation for layout commands."""

import logging
from typing import Any, Optional
from collections.abc import Mapping
from .parser import find_separator_indexes
from .types import (
    OPTION_ARG_KEYS,
    ErrorType,
    TransformError,
    ValidationError,
    ValidationResult,
)


# Upper bound on input length, in characters
DEFAULT_MAX_INPUT_SIZE = 5 * 1024 * 1024


class ErrorHandler:
    """
    Validates selections and option arguments before a layout command runs.

    The scanner and transformer functions accept any string; this class
    decides what the calling layer should refuse or warn about.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the error handler.

        Args:
            logger: Optional logger instance for error reporting
        """
        self.logger = logger or logging.getLogger(__name__)

    def validate_input(self, text: str, max_size: int = DEFAULT_MAX_INPUT_SIZE) -> ValidationResult:
        """
        Validate a text selection.

        Args:
            text: Selected text
            max_size: Maximum accepted length in characters

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []

        if not text.strip():
            errors.append(ValidationError(
                type=ErrorType.EMPTY,
                message="Selection is empty",
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        if len(text) > max_size:
            errors.append(ValidationError(
                type=ErrorType.SIZE,
                message=f"Selection is too large ({len(text)} characters, limit {max_size})",
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        if not find_separator_indexes(text.strip()):
            warnings.append("Selection has no brackets, commas or semicolons to split on")

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )

    def validate_options(self, args: Any) -> ValidationResult:
        """
        Validate keybinding-style option arguments.

        Args:
            args: Mapping such as ``{"isCommaOnNewLine": true}``, or None

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []

        if args is None:
            return ValidationResult(is_valid=True, errors=errors, warnings=warnings)

        if not isinstance(args, Mapping):
            errors.append(ValidationError(
                type=ErrorType.OPTIONS,
                message=f"Option arguments must be a mapping, got {type(args).__name__}",
                location="args"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        for key in args:
            if key not in OPTION_ARG_KEYS:
                warnings.append(f"Unknown option '{key}' ignored")

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )

    def handle_transform_error(self, error: TransformError) -> str:
        """
        Log a TransformError and turn it into a user-facing message.

        Args:
            error: TransformError to handle

        Returns:
            Message suitable for display
        """
        self.logger.error(f"Transform error: {error.error_type.value} - {error}")

        if error.error_type == ErrorType.OPTIONS:
            return f"{error} (expected e.g. {{\"isCommaOnNewLine\": true}})"
        elif error.error_type == ErrorType.COMMAND:
            return f"{error}. Available commands: toggle, compact"
        return str(error)
