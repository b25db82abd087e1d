"""Constants used across the typst-writer package."""

from __future__ import annotations

# Typst markup
HEADING_MARKER = "="
ODD_LEVEL_MARKER = "- "
EVEN_LEVEL_MARKER = "+ "
DEFAULT_INDENT_SPACES = 2
DEFAULT_INDENT = " " * DEFAULT_INDENT_SPACES

# Limits
DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024

# Files
MARKDOWN_EXTENSIONS = (".md", ".markdown", ".mdown", ".mkd")
