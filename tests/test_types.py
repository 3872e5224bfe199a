"""Tests for value types."""

import dataclasses
import pytest
from line_layout.types import (
    BalancedBlock,
    ErrorType,
    SeparatorLocation,
    TextLayout,
    TransformError,
    TransformOptions,
)


class TestTransformOptions:
    """Tests for TransformOptions."""

    def test_default(self):
        assert not TransformOptions().is_comma_on_new_line

    def test_from_args_none(self):
        """Test missing args leave the choice to the caller."""
        assert TransformOptions.from_args(None) is None

    @pytest.mark.parametrize("args, expected", [
        ({"isCommaOnNewLine": True}, True),
        ({"isCommaOnNewLine": False}, False),
        ({"isCommaOnNewLine": 1}, True),
        ({"isCommaOnNewLine": ""}, False),
        ({"is_comma_on_new_line": True}, True),
        ({}, False),
        ({"other": True}, False),
    ])
    def test_from_args(self, args, expected):
        """Test keybinding-style args are read by truthiness."""
        assert TransformOptions.from_args(args).is_comma_on_new_line is expected

    def test_from_args_not_mapping(self):
        with pytest.raises(TransformError) as exc_info:
            TransformOptions.from_args("isCommaOnNewLine")

        assert exc_info.value.error_type is ErrorType.OPTIONS
        assert exc_info.value.context == {"args": "isCommaOnNewLine"}

    def test_from_comma_placement(self):
        assert TransformOptions.from_comma_placement("new-line").is_comma_on_new_line
        assert not TransformOptions.from_comma_placement("same-line").is_comma_on_new_line

    def test_from_unknown_comma_placement(self):
        with pytest.raises(TransformError, match="Unknown comma placement"):
            TransformOptions.from_comma_placement("start")

    def test_frozen(self):
        """Test options cannot be mutated after creation."""
        options = TransformOptions()
        with pytest.raises(dataclasses.FrozenInstanceError):
            options.is_comma_on_new_line = True


class TestScanValues:
    """Tests for scanner value types."""

    def test_separator_location_equality(self):
        assert SeparatorLocation(3, True) == SeparatorLocation(index=3, is_comma=True)

    def test_balanced_block_frozen(self):
        block = BalancedBlock(start=0, end=4)
        with pytest.raises(dataclasses.FrozenInstanceError):
            block.end = 5

    def test_layout_values(self):
        assert TextLayout("single-line") is TextLayout.SINGLE_LINE
        assert TextLayout.MULTI_LINE.value == "multi-line"
