from __future__ import annotations

from typst_writer.events import create_parser, iter_events
from typst_writer.models import Event, EventKind, Tag, TagKind

PARAGRAPH = Tag(TagKind.PARAGRAPH)
LIST = Tag(TagKind.LIST)
ITEM = Tag(TagKind.ITEM)


def _events(markdown: str, **kwargs) -> list[Event]:
    return list(iter_events(markdown, **kwargs))


def _starts(events: list[Event]) -> list[Tag]:
    return [event.tag for event in events if event.kind is EventKind.START]


def _text(events: list[Event]) -> str:
    return "".join(event.text for event in events if event.kind is EventKind.TEXT)


def test_iter_events_is_lazy_iterator():
    events = iter_events("Hello")
    assert iter(events) is events


def test_paragraph_events():
    assert _events("Hello world!") == [
        Event.start(PARAGRAPH),
        Event.text_run("Hello world!"),
        Event.end(PARAGRAPH),
    ]


def test_heading_levels():
    for level in range(1, 7):
        events = _events(f"{'#' * level} Title")
        heading = Tag(TagKind.HEADING, level=level)
        assert events == [Event.start(heading), Event.text_run("Title"), Event.end(heading)]


def test_tight_list_has_no_paragraph_events():
    assert _events("- a\n- b") == [
        Event.start(LIST),
        Event.start(ITEM),
        Event.text_run("a"),
        Event.end(ITEM),
        Event.start(ITEM),
        Event.text_run("b"),
        Event.end(ITEM),
        Event.end(LIST),
    ]


def test_loose_list_keeps_paragraph_events():
    events = _events("- a\n\n- b")
    assert _starts(events).count(PARAGRAPH) == 2


def test_nested_list_opens_second_list_inside_item():
    events = _events("- Item 1\n  - Nested item\n- Item 2")
    kinds = [event.tag.kind for event in events if event.kind is EventKind.START]
    assert kinds == [TagKind.LIST, TagKind.ITEM, TagKind.LIST, TagKind.ITEM, TagKind.ITEM]


def test_ordered_list_is_a_plain_list_tag():
    assert _starts(_events("3. a"))[:2] == [LIST, ITEM]


def test_inline_styles():
    starts = _starts(_events("_a_ **b** ~~c~~"))
    assert [tag.kind for tag in starts] == [
        TagKind.PARAGRAPH,
        TagKind.EMPHASIS,
        TagKind.STRONG,
        TagKind.STRIKETHROUGH,
    ]


def test_single_tilde_strikethrough():
    events = _events("a ~gone~ b")
    assert Tag(TagKind.STRIKETHROUGH) in _starts(events)
    assert _text(events) == "a gone b"


def test_strikethrough_can_be_disabled():
    events = _events("~~c~~ ~d~", strikethrough=False)
    assert TagKind.STRIKETHROUGH not in [tag.kind for tag in _starts(events)]
    assert _text(events) == "~~c~~ ~d~"


def test_create_parser_without_strikethrough_rule():
    tokens = create_parser(strikethrough=False).parse("~~c~~")
    assert all(child.type != "s_open" for child in tokens[1].children)


def test_link_destination():
    events = _events("Check out [this link](https://example.com).")
    assert Tag(TagKind.LINK, dest_url="https://example.com") in _starts(events)


def test_link_destination_is_not_filtered_by_scheme():
    events = _events("[x](javascript:alert(1))")
    assert Tag(TagKind.LINK, dest_url="javascript:alert(1)") in _starts(events)


def test_inline_code_and_breaks():
    assert _events("`x` a\nb  \nc")[1:-1] == [
        Event.code("x"),
        Event.text_run(" a"),
        Event.soft_break(),
        Event.text_run("b"),
        Event.hard_break(),
        Event.text_run("c"),
    ]


def test_fenced_code_becomes_text_inside_code_block_tag():
    code_block = Tag(TagKind.CODE_BLOCK)
    assert _events("```python\nx = 1\n```") == [
        Event.start(code_block),
        Event.text_run("x = 1\n"),
        Event.end(code_block),
    ]


def test_image_alt_text_is_wrapped_in_image_tag():
    image = Tag(TagKind.IMAGE, dest_url="img.png")
    assert _events("![alt](img.png)")[1:-1] == [
        Event.start(image),
        Event.text_run("alt"),
        Event.end(image),
    ]


def test_blockquote_wraps_paragraph():
    kinds = [tag.kind for tag in _starts(_events("> quoted"))]
    assert kinds == [TagKind.BLOCK_QUOTE, TagKind.PARAGRAPH]


def test_html_and_rules_are_reported():
    events = _events("<div>\nhi\n</div>\n\n---")
    assert [event.kind for event in events] == [EventKind.HTML, EventKind.RULE]
