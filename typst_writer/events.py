"""Markdown parsing into document events using markdown-it-py."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from markdown_it import MarkdownIt
from markdown_it.token import Token

from .models import Event, Tag, TagKind

# markdown-it token names (without the _open/_close suffix) mapped to tag kinds
_PAIRED_TAGS = {
    "paragraph": TagKind.PARAGRAPH,
    "heading": TagKind.HEADING,
    "bullet_list": TagKind.LIST,
    "ordered_list": TagKind.LIST,
    "list_item": TagKind.ITEM,
    "em": TagKind.EMPHASIS,
    "strong": TagKind.STRONG,
    "s": TagKind.STRIKETHROUGH,
    "link": TagKind.LINK,
    "blockquote": TagKind.BLOCK_QUOTE,
}


def create_parser(strikethrough: bool = True) -> MarkdownIt:
    """Create a CommonMark parser, optionally with GFM strikethrough.

    Strikethrough accepts both ``~text~`` and ``~~text~~``. Every link
    destination is kept as written, including schemes such as ``javascript:``
    that markdown-it rejects by default; the Typst output never executes them.

    Args:
        strikethrough: Whether tilde-delimited strikethrough is recognized.

    Returns:
        MarkdownIt: Configured parser.
    """
    md = MarkdownIt("commonmark", {"strikethrough_single_tilde": strikethrough})
    md.validateLink = lambda url: True
    if strikethrough:
        md.enable("strikethrough")
    return md


def iter_events(markdown: str, strikethrough: bool = True) -> Iterator[Event]:
    """Parse Markdown text and yield document events in order.

    Args:
        markdown: Markdown source text.
        strikethrough: Whether ``~text~`` and ``~~text~~`` are recognized as
            strikethrough.

    Returns:
        Iterator[Event]: Events in document order.

    Examples:
        list(iter_events("*hi*"))
    """
    tokens = create_parser(strikethrough).parse(markdown)
    return convert_tokens(tokens)


def convert_tokens(tokens: Iterable[Token]) -> Iterator[Event]:
    """Flatten markdown-it block and inline tokens into document events.

    Inline tokens are expanded into their children. Paragraphs that markdown-it
    marks as hidden (items of tight lists) produce no events.

    Args:
        tokens: Tokens as returned by `MarkdownIt.parse`.

    Returns:
        Iterator[Event]: Events in document order.
    """
    for token in tokens:
        if token.type == "inline":
            yield from convert_tokens(token.children or [])
        else:
            yield from _convert_token(token)


def _convert_token(token: Token) -> Iterator[Event]:
    """Yield the events for a single non-inline token."""
    if token.nesting != 0:
        if token.hidden:
            return
        name = token.type.rsplit("_", 1)[0]
        kind = _PAIRED_TAGS.get(name)
        if kind is None:
            return
        tag = _build_tag(kind, token)
        yield Event.start(tag) if token.nesting == 1 else Event.end(tag)
    elif token.type == "text":
        yield Event.text_run(token.content)
    elif token.type == "code_inline":
        yield Event.code(token.content)
    elif token.type == "softbreak":
        yield Event.soft_break()
    elif token.type == "hardbreak":
        yield Event.hard_break()
    elif token.type in ("fence", "code_block"):
        tag = Tag(TagKind.CODE_BLOCK)
        yield Event.start(tag)
        yield Event.text_run(token.content)
        yield Event.end(tag)
    elif token.type == "image":
        tag = Tag(TagKind.IMAGE, dest_url=str(token.attrGet("src") or ""))
        yield Event.start(tag)
        yield from convert_tokens(token.children or [])
        yield Event.end(tag)
    elif token.type in ("html_block", "html_inline"):
        yield Event.html(token.content)
    elif token.type == "hr":
        yield Event.rule()


def _build_tag(kind: TagKind, token: Token) -> Tag:
    """Build a tag, reading the heading level or link destination when needed."""
    if kind is TagKind.HEADING:
        # Heading tokens carry their level in the HTML tag name, e.g. "h2"
        return Tag(kind, level=int(token.tag[1:]))
    if kind is TagKind.LINK:
        return Tag(kind, dest_url=str(token.attrGet("href") or ""))
    return Tag(kind)
