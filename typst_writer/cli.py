"""
Converts a Markdown file to Typst.
Writes the result to the given output file, or to stdout.
"""

from __future__ import annotations

from pathlib import Path

import click
from .config import ConfigError, build_config
from .converter import convert_file
from .exceptions import TranslationError
from .filesystem import resolve_markdown_path, write_output

__all__ = ["cli"]


@click.command()
@click.version_option(package_name="typst-writer")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    help="Write Typst output to this file instead of stdout",
)
@click.option("--indent-spaces", type=int, help="Spaces per nested list level")
@click.option(
    "--strikethrough/--no-strikethrough",
    default=None,
    help="Parse ~text~ and ~~text~~ as strikethrough",
)
@click.argument("filepath", type=click.Path(exists=True, dir_okay=False))
def cli(
    filepath: str,
    output: str | None = None,
    indent_spaces: int | None = None,
    strikethrough: bool | None = None,
):
    """
    Entry point for converting a Markdown file to Typst.

    Args:
        filepath: Path to the Markdown file to convert.
        output: Destination file; stdout when omitted.
        indent_spaces: Override for list indentation width.
        strikethrough: Override for strikethrough parsing.

    Returns:
        None.

    Raises:
        click.BadParameter: If CLI parameters reference invalid paths or contain
            invalid configuration values.
        click.ClickException: If filesystem safety checks fail or the output
            cannot be written.

    Examples:
        typst-writer README.md -o README.typ --indent-spaces 4
    """
    base_dir = Path.cwd().resolve()
    try:
        filepath = resolve_markdown_path(filepath, base_dir)
    except ValueError as error:
        raise click.BadParameter(str(error)) from error
    try:
        config = build_config(
            filepath.parent,
            indent_spaces=indent_spaces,
            strikethrough=strikethrough,
        )
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error

    try:
        typst = convert_file(filepath, config)
    except (IOError, ValueError, TranslationError) as error:
        raise click.ClickException(str(error)) from error

    # Writes output file
    if output is not None:
        try:
            write_output(Path(output), typst)
        except IOError as error:
            raise click.ClickException(str(error)) from error
    # Prints to stdout
    else:
        click.echo(typst, nl=False)


if __name__ == "__main__":
    cli()
