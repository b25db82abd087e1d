"""Markdown to Typst conversion entry points."""

from __future__ import annotations

import io
from pathlib import Path

from .config import TypstConfig, validate_config
from .events import iter_events
from .filesystem import get_max_file_size, read_markdown
from .writer import TypstWriter


def markdown_to_typst(markdown: str, config: TypstConfig | None = None) -> str:
    """Convert Markdown text to Typst markup.

    Args:
        markdown: Markdown source text.
        config: Conversion settings. Defaults to a new `TypstConfig`, which
            enables strikethrough.

    Returns:
        str: Typst source for the document.

    Raises:
        ConfigError: If the configuration fails validation.

    Examples:
        markdown_to_typst("This is **bold** text.")  # "This is *bold* text.\\n\\n"
        markdown_to_typst("- a\\n  - b")  # "- a\\n  + b\\n\\n\\n"
    """
    config = config or TypstConfig()
    validate_config(config)

    writer = TypstWriter(io.StringIO(), indent=config.indent)
    sink = writer.run(iter_events(markdown, strikethrough=config.strikethrough))
    return sink.getvalue()


def convert_file(filepath: Path, config: TypstConfig | None = None) -> str:
    """Read a UTF-8 Markdown file and convert it to Typst markup.

    The file must not exceed ``config.max_file_size`` bytes, or the value of
    ``TYPST_WRITER_MAX_FILE_SIZE`` when that variable is set.

    Raises:
        IOError: If the file is missing, too large, not UTF-8, or changes while
            it is being read.
        ValueError: If the size limit from the environment is invalid.
        ConfigError: If the configuration fails validation.
    """
    config = config or TypstConfig()
    validate_config(config)

    markdown = read_markdown(filepath, get_max_file_size(default=config.max_file_size))
    return markdown_to_typst(markdown, config)
