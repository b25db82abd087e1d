"""
typst-writer: Markdown to Typst converter.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    typst-writer README.md -o README.typ

Library Usage:
    from typst_writer import markdown_to_typst

    typst = markdown_to_typst("Some *emphasis* and a [link](https://typst.app).")

Lower-level pieces are available for custom pipelines:

    from typst_writer import TypstWriter, iter_events

    with open("out.typ", "w", encoding="utf-8") as sink:
        TypstWriter(sink).run(iter_events(markdown))
"""

from .config import ConfigError, TypstConfig
from .converter import convert_file, markdown_to_typst
from .escape import escape_string, escape_text
from .events import iter_events
from .exceptions import SinkWriteError, TranslationError
from .models import Event, EventKind, Tag, TagKind
from .writer import TypstWriter

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "markdown_to_typst",
    "convert_file",
    "iter_events",
    "TypstWriter",
    # Data models
    "Event",
    "EventKind",
    "Tag",
    "TagKind",
    "TypstConfig",
    # Utilities
    "escape_text",
    "escape_string",
    # Exceptions
    "ConfigError",
    "SinkWriteError",
    "TranslationError",
    # Version
    "__version__",
]
