"""Layout command facade used by the CLI and other callers."""

import logging
from collections.abc import Mapping
from typing import Any, Optional, Union
from .types import (
    Command,
    ErrorType,
    TextLayout,
    TransformError,
    TransformOptions,
    TransformResult,
)
from .parser import detect_layout
from .transformer import compact_blocks, toggle_line_layout
from .error_handler import DEFAULT_MAX_INPUT_SIZE, ErrorHandler


class LayoutTransformer:
    """
    Runs layout commands on a text selection.

    Validates the selection, resolves comma placement, dispatches to the pure
    transformer functions and reports the outcome as a TransformResult. A
    rejected selection comes back untouched with ``success=False``.
    """

    def __init__(self, default_options: Optional[TransformOptions] = None,
                 max_input_size: int = DEFAULT_MAX_INPUT_SIZE,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the layout transformer.

        Args:
            default_options: Options used when a call supplies none
            max_input_size: Largest selection accepted, in characters
            logger: Optional logger instance
        """
        self.default_options = default_options or TransformOptions()
        self.max_input_size = max_input_size
        self.logger = logger or logging.getLogger(__name__)
        self.error_handler = ErrorHandler(self.logger)

    def resolve_options(self, options: Optional[TransformOptions] = None,
                        args: Optional[Mapping[str, Any]] = None) -> TransformOptions:
        """
        Pick the options for a call.

        Explicit options win over keybinding-style args, which win over the
        configured defaults.

        Raises:
            TransformError: If args is not a mapping
        """
        if options is not None:
            return options

        validation = self.error_handler.validate_options(args)
        for warning in validation.warnings:
            self.logger.warning(warning)
        if not validation.is_valid:
            raise TransformError(
                "; ".join(error.message for error in validation.errors),
                ErrorType.OPTIONS,
                context={"args": args}
            )

        return TransformOptions.from_args(args) or self.default_options

    def detect(self, text: str) -> TextLayout:
        """Classify the selection as single-line or multi-line."""
        return detect_layout(text)

    def toggle(self, text: str, options: Optional[TransformOptions] = None) -> TransformResult:
        """Toggle the selection between single-line and multi-line layout."""
        return self.run(Command.TOGGLE, text, options)

    def compact(self, text: str) -> TransformResult:
        """Put every top-level brace block of the selection on its own line."""
        return self.run(Command.COMPACT, text)

    def run(self, command: Union[Command, str], text: str,
            options: Optional[TransformOptions] = None) -> TransformResult:
        """
        Run a layout command on a selection.

        Args:
            command: Command or its name ("toggle", "compact")
            text: Selected text
            options: Comma placement for toggle; defaults to default_options

        Returns:
            TransformResult with the new text

        Raises:
            TransformError: If the command is unknown
        """
        command = self._resolve_command(command)
        options = options or self.default_options

        validation = self.error_handler.validate_input(text, self.max_input_size)
        if not validation.is_valid:
            errors = [error.message for error in validation.errors]
            self.logger.info(f"Skipping {command.value}: {'; '.join(errors)}")
            return TransformResult(
                success=False,
                text=text,
                command=command,
                errors=errors,
                error_type=validation.errors[0].type
            )

        layout = detect_layout(text)
        self.logger.debug(f"Running {command.value} on {len(text)} characters ({layout.value})")

        if command is Command.TOGGLE:
            new_text = toggle_line_layout(text, options)
            warnings = validation.warnings if layout is TextLayout.SINGLE_LINE else []
        else:
            new_text = compact_blocks(text)
            warnings = []

        for warning in warnings:
            self.logger.warning(warning)

        self.logger.info(f"{command.value}: {len(text)} -> {len(new_text)} characters")

        return TransformResult(
            success=True,
            text=new_text,
            command=command,
            layout=layout,
            changed=new_text != text,
            warnings=list(warnings)
        )

    def _resolve_command(self, command: Union[Command, str]) -> Command:
        """Turn a command name into a Command."""
        if isinstance(command, Command):
            return command
        try:
            return Command(command)
        except ValueError:
            raise TransformError(
                f"Unknown command '{command}'",
                ErrorType.COMMAND,
                context={"command": command}
            ) from None
