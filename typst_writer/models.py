"""Data models for typst-writer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class EventKind(Enum):
    """Kinds of document events produced by the Markdown parser.

    Attributes:
        START: Opening of a tagged span.
        END: Closing of a tagged span.
        TEXT: A run of literal text.
        CODE: An inline code span.
        SOFT_BREAK: A line break inside a paragraph that renders as a space.
        HARD_BREAK: A forced line break.
        HTML: Raw HTML, ignored by the writer.
        RULE: A thematic break, ignored by the writer.
    """

    START = auto()
    END = auto()
    TEXT = auto()
    CODE = auto()
    SOFT_BREAK = auto()
    HARD_BREAK = auto()
    HTML = auto()
    RULE = auto()


class TagKind(Enum):
    """Kinds of tags that bracket a span of events.

    The writer produces output for the first eight members only; the rest are
    accepted and ignored.
    """

    PARAGRAPH = auto()
    HEADING = auto()
    LIST = auto()
    ITEM = auto()
    EMPHASIS = auto()
    STRONG = auto()
    STRIKETHROUGH = auto()
    LINK = auto()
    BLOCK_QUOTE = auto()
    CODE_BLOCK = auto()
    IMAGE = auto()


@dataclass(frozen=True)
class Tag:
    """A structural marker carried by start and end events.

    Attributes:
        kind: Tag kind.
        level: Heading level from 1 to 6, for headings.
        dest_url: Destination of links and images.
    """

    kind: TagKind
    level: int = 0
    dest_url: str = ""


@dataclass(frozen=True)
class Event:
    """One unit of parsed document structure.

    Attributes:
        kind: Event kind.
        tag: Tag for start and end events, otherwise None.
        text: Payload for text, code, and HTML events.
    """

    kind: EventKind
    tag: Tag | None = None
    text: str = ""

    @classmethod
    def start(cls, tag: Tag) -> Event:
        return cls(EventKind.START, tag=tag)

    @classmethod
    def end(cls, tag: Tag) -> Event:
        return cls(EventKind.END, tag=tag)

    @classmethod
    def text_run(cls, text: str) -> Event:
        return cls(EventKind.TEXT, text=text)

    @classmethod
    def code(cls, text: str) -> Event:
        return cls(EventKind.CODE, text=text)

    @classmethod
    def soft_break(cls) -> Event:
        return cls(EventKind.SOFT_BREAK)

    @classmethod
    def hard_break(cls) -> Event:
        return cls(EventKind.HARD_BREAK)

    @classmethod
    def html(cls, text: str) -> Event:
        return cls(EventKind.HTML, text=text)

    @classmethod
    def rule(cls) -> Event:
        return cls(EventKind.RULE)


@dataclass
class WriterState:
    """Mutable state of a single translation run.

    Attributes:
        end_newline: Whether the last emitted character was a newline.
        list_level: Number of currently open lists.
    """

    end_newline: bool = True
    list_level: int = 0
