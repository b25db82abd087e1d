"""Typst rendering of document events."""

from __future__ import annotations

import io
from collections.abc import Iterable
from typing import TextIO

from .constants import DEFAULT_INDENT, EVEN_LEVEL_MARKER, HEADING_MARKER, ODD_LEVEL_MARKER
from .escape import escape_string, escape_text
from .exceptions import SinkWriteError
from .models import Event, EventKind, Tag, TagKind, WriterState


class TypstWriter:
    """Convert a stream of document events into Typst markup.

    The writer consumes events once, in order, without lookahead. Output goes to
    `sink`, which only needs a ``write(str)`` method.

    Args:
        sink: Destination for the generated text. Defaults to a new `io.StringIO`.
        indent: Indentation unit repeated once per nested list level.

    Examples:
        writer = TypstWriter()
        writer.run(iter_events("# Title")).getvalue()  # "= Title\\n\\n"
    """

    def __init__(self, sink: TextIO | None = None, indent: str = DEFAULT_INDENT):
        self.sink = sink if sink is not None else io.StringIO()
        self.indent = indent
        self.state = WriterState()

    def run(self, events: Iterable[Event]) -> TextIO:
        """Render every event and return the sink.

        Raises:
            SinkWriteError: If the sink rejects a write. The run stops there.
        """
        self.state = WriterState()
        for event in events:
            self.process_event(event)
        return self.sink

    def process_event(self, event: Event) -> None:
        """Dispatch one event to the rule for its kind."""
        kind = event.kind
        if kind is EventKind.START:
            self.start_tag(event.tag)
        elif kind is EventKind.END:
            self.end_tag(event.tag)
        elif kind is EventKind.TEXT:
            self.write_text(event.text)
        elif kind is EventKind.SOFT_BREAK:
            self.write(" ")
        elif kind is EventKind.HARD_BREAK:
            self.write("\\\n")
        elif kind is EventKind.CODE:
            self.write('#raw("')
            self.write(escape_string(event.text))
            self.write('")')
        # Other events (HTML, rules) have no Typst counterpart

    def start_tag(self, tag: Tag) -> None:
        """Emit the opening markup for a tag."""
        kind = tag.kind
        if kind is TagKind.PARAGRAPH:
            self.ensure_newline()
        elif kind is TagKind.HEADING:
            self.ensure_newline()
            self.write(HEADING_MARKER * tag.level)
            self.write(" ")
        elif kind is TagKind.LIST:
            self.ensure_newline()
            self.state.list_level += 1
        elif kind is TagKind.ITEM:
            # Marker depends on nesting parity only, not on the list being ordered
            level = self.state.list_level
            self.write(self.indent * max(level - 1, 0))
            self.write(ODD_LEVEL_MARKER if level % 2 == 1 else EVEN_LEVEL_MARKER)
        elif kind is TagKind.EMPHASIS:
            self.write("_")
        elif kind is TagKind.STRONG:
            self.write("*")
        elif kind is TagKind.STRIKETHROUGH:
            self.write("#strike[")
        elif kind is TagKind.LINK:
            self.write('#link("')
            self.write(escape_string(tag.dest_url))
            self.write('")[')

    def end_tag(self, tag: Tag) -> None:
        """Emit the closing markup for a tag."""
        kind = tag.kind
        if kind in (TagKind.PARAGRAPH, TagKind.HEADING):
            self.write("\n\n")
        elif kind is TagKind.LIST:
            self.state.list_level = max(self.state.list_level - 1, 0)
            if self.state.list_level == 0:
                self.write("\n")
        elif kind is TagKind.ITEM:
            self.write("\n")
        elif kind is TagKind.EMPHASIS:
            self.write("_")
        elif kind is TagKind.STRONG:
            self.write("*")
        elif kind in (TagKind.STRIKETHROUGH, TagKind.LINK):
            self.write("]")

    def write_text(self, text: str) -> None:
        """Write literal text with markup characters escaped."""
        self.write(escape_text(text))

    def ensure_newline(self) -> None:
        """Start a new line unless the output already ends with one."""
        if not self.state.end_newline:
            self.write("\n")

    def write(self, text: str) -> None:
        """Append text to the sink and record whether it ended with a newline.

        Raises:
            SinkWriteError: If the sink raises `OSError`, or `ValueError` for a
                closed stream.
        """
        if not text:
            return
        try:
            self.sink.write(text)
        except (OSError, ValueError) as error:
            raise SinkWriteError(text, str(error)) from error
        self.state.end_newline = text.endswith("\n")
