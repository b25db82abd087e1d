"""Escaping helpers for Typst markup and string literals."""

from __future__ import annotations

# Backslash must come first so later replacements are not escaped twice.
_MARKUP_SPECIALS = ("\\", "*", "_", "#", "<", ">", "@", "$", "`")


def escape_text(text: str) -> str:
    r"""Escape characters that Typst would read as markup.

    Args:
        text: Literal text from the document.

    Returns:
        str: Text with each markup character preceded by a backslash.

    Examples:
        escape_text("#tag")  # "\#tag"
        escape_text("a*b")  # "a\*b"
    """
    for char in _MARKUP_SPECIALS:
        text = text.replace(char, "\\" + char)
    return text


def escape_string(text: str) -> str:
    r"""Escape text for use inside a double-quoted Typst string literal.

    Only backslashes and double quotes are special inside a string literal.

    Examples:
        escape_string('say "hi"')  # 'say \"hi\"'
    """
    return text.replace("\\", "\\\\").replace('"', '\\"')
