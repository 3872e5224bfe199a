"""Command-line interface for Line Layout."""

import json
import logging
from pathlib import Path
from typing import Optional

import click

from . import __version__
from .layout_transformer import LayoutTransformer
from .types import (
    COMMA_PLACEMENTS,
    ErrorType,
    TransformError,
    TransformOptions,
    TransformResult,
)


def _read_input(input_file: Optional[Path]) -> str:
    """Read the selection from a file, or stdin when no file is given."""
    from_stdin = input_file is None or str(input_file) == "-"
    try:
        if from_stdin:
            return click.get_text_stream("stdin").read()
        return input_file.read_text(encoding="utf-8")
    except (UnicodeDecodeError, OSError) as e:
        source = "stdin" if from_stdin else input_file
        click.echo(f"Error: cannot read {source}: {e}", err=True)
        raise SystemExit(1)


def _write_output(text: str, output: Optional[str]) -> None:
    """Write the result to a file, or stdout without a trailing newline."""
    if output:
        output_path = Path(output)
        output_path.write_text(text, encoding="utf-8")
        click.echo(f"Wrote {len(text)} characters to {output_path}", err=True)
    else:
        click.echo(text, nl=False)


def _fail(transformer: LayoutTransformer, error: TransformError) -> None:
    """Report a TransformError on stderr and exit with status 1."""
    click.echo(f"Error: {transformer.error_handler.handle_transform_error(error)}", err=True)
    raise SystemExit(1)


def _finish(result: TransformResult, output: Optional[str]) -> None:
    """Emit a TransformResult; empty selections are echoed back untouched."""
    if not result.success:
        if result.error_type is not ErrorType.EMPTY:
            click.echo(f"Error: {'; '.join(result.errors or [])}", err=True)
            raise SystemExit(1)
        for error in result.errors or []:
            click.echo(f"Warning: {error}", err=True)
    for warning in result.warnings:
        click.echo(f"Warning: {warning}", err=True)
    _write_output(result.text, output)


input_argument = click.argument(
    "input_file", required=False,
    type=click.Path(exists=True, dir_okay=False, allow_dash=True, path_type=Path)
)
output_option = click.option("--output", "-o", help="Output file path (default: stdout)")


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--max-size", default=None, type=int,
              help="Largest accepted input, in characters (default: 5MiB)")
@click.pass_context
def main(ctx: click.Context, verbose: bool, max_size: Optional[int]):
    """Line Layout - toggle single-line/multi-line text and compact brace blocks."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.ERROR,
        format="%(levelname)s %(name)s: %(message)s"
    )
    kwargs = {"max_input_size": max_size} if max_size is not None else {}
    ctx.obj = LayoutTransformer(**kwargs)


@main.command()
@input_argument
@output_option
@click.option("--comma-placement", "-c", type=click.Choice(COMMA_PLACEMENTS),
              default="same-line", show_default=True,
              help="Keep commas at the end of the line or start the new line with them")
@click.option("--args", "args_json", default=None,
              help='Keybinding-style options as JSON, e.g. \'{"isCommaOnNewLine": true}\'')
@click.pass_obj
def toggle(transformer: LayoutTransformer, input_file: Optional[Path], output: Optional[str],
           comma_placement: str, args_json: Optional[str]):
    """Toggle text between single-line and multi-line layout."""
    try:
        if args_json is not None:
            try:
                args = json.loads(args_json)
            except json.JSONDecodeError as e:
                click.echo(f"Error: invalid --args JSON: {e.msg} at column {e.colno}", err=True)
                raise SystemExit(1)
            options = transformer.resolve_options(args=args)
        else:
            options = TransformOptions.from_comma_placement(comma_placement)

        result = transformer.toggle(_read_input(input_file), options)
    except TransformError as e:
        _fail(transformer, e)

    _finish(result, output)


@main.command()
@input_argument
@output_option
@click.pass_obj
def compact(transformer: LayoutTransformer, input_file: Optional[Path], output: Optional[str]):
    """Put every top-level { ... } block on its own line."""
    result = transformer.compact(_read_input(input_file))
    _finish(result, output)


@main.command()
@input_argument
@click.pass_obj
def detect(transformer: LayoutTransformer, input_file: Optional[Path]):
    """Print whether the text is single-line or multi-line."""
    click.echo(transformer.detect(_read_input(input_file)).value)


if __name__ == '__main__':
    main()
