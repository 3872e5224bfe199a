"""Tests for error handler."""

import logging
from line_layout.error_handler import DEFAULT_MAX_INPUT_SIZE, ErrorHandler
from line_layout.types import ErrorType, TransformError


class TestErrorHandler:
    """Tests for ErrorHandler class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.error_handler = ErrorHandler()

    def test_validate_input_valid(self):
        """Test validation of a splittable selection."""
        result = self.error_handler.validate_input('{ "a": 1, "b": 2 }')

        assert result.is_valid
        assert len(result.errors) == 0
        assert result.warnings == []

    def test_validate_input_empty(self):
        """Test validation of empty and whitespace-only selections."""
        for text in ("", "  \n\t "):
            result = self.error_handler.validate_input(text)

            assert not result.is_valid
            assert result.errors[0].type == ErrorType.EMPTY
            assert result.errors[0].location == "input"

    def test_validate_input_too_large(self):
        """Test validation of a selection above the size limit."""
        result = self.error_handler.validate_input("x" * 11, max_size=10)

        assert not result.is_valid
        assert result.errors[0].type == ErrorType.SIZE
        assert "11" in result.errors[0].message

    def test_validate_input_at_limit(self):
        """Test a selection exactly at the limit is accepted."""
        assert self.error_handler.validate_input("[" * 10, max_size=10).is_valid

    def test_default_limit(self):
        assert DEFAULT_MAX_INPUT_SIZE == 5 * 1024 * 1024

    def test_validate_input_nothing_to_split(self):
        """Test a selection without separators produces a warning."""
        result = self.error_handler.validate_input("just words")

        assert result.is_valid
        assert len(result.warnings) == 1

    def test_validate_options_none(self):
        result = self.error_handler.validate_options(None)
        assert result.is_valid
        assert result.warnings == []

    def test_validate_options_known_keys(self):
        result = self.error_handler.validate_options({"isCommaOnNewLine": True})
        assert result.is_valid
        assert result.warnings == []

    def test_validate_options_unknown_key(self):
        """Test unknown keys are warnings, not errors."""
        result = self.error_handler.validate_options({"isCommaOnNewLine": True, "indent": 2})

        assert result.is_valid
        assert result.warnings == ["Unknown option 'indent' ignored"]

    def test_validate_options_not_mapping(self):
        """Test non-mapping option arguments are rejected."""
        result = self.error_handler.validate_options([True])

        assert not result.is_valid
        assert result.errors[0].type == ErrorType.OPTIONS
        assert "list" in result.errors[0].message

    def test_handle_options_error(self, caplog):
        """Test handling of option errors."""
        error = TransformError("Option arguments must be a mapping, got str", ErrorType.OPTIONS)

        with caplog.at_level(logging.ERROR):
            message = self.error_handler.handle_transform_error(error)

        assert "isCommaOnNewLine" in message
        assert "options" in caplog.text

    def test_handle_command_error(self):
        """Test handling of unknown command errors."""
        error = TransformError("Unknown command 'reformat'", ErrorType.COMMAND)

        message = self.error_handler.handle_transform_error(error)

        assert message.startswith("Unknown command 'reformat'")
        assert "toggle" in message and "compact" in message

    def test_handle_other_error(self):
        error = TransformError("Selection is empty", ErrorType.EMPTY)
        assert self.error_handler.handle_transform_error(error) == "Selection is empty"
