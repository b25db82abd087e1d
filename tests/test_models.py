from typst_writer.models import Event, EventKind, Tag, TagKind, WriterState


def test_writer_state_defaults():
    state = WriterState()

    assert state.end_newline is True
    assert state.list_level == 0


def test_tag_defaults():
    tag = Tag(TagKind.PARAGRAPH)

    assert tag.level == 0
    assert tag.dest_url == ""


def test_event_constructors():
    heading = Tag(TagKind.HEADING, level=2)

    assert Event.start(heading) == Event(EventKind.START, tag=heading)
    assert Event.end(heading) == Event(EventKind.END, tag=heading)
    assert Event.text_run("hi") == Event(EventKind.TEXT, text="hi")
    assert Event.code("x") == Event(EventKind.CODE, text="x")
    assert Event.soft_break().kind is EventKind.SOFT_BREAK
    assert Event.hard_break().kind is EventKind.HARD_BREAK
    assert Event.html("<br>") == Event(EventKind.HTML, text="<br>")
    assert Event.rule().kind is EventKind.RULE


def test_events_are_hashable_values():
    tag = Tag(TagKind.LINK, dest_url="https://example.com")

    assert {Event.start(tag), Event.start(tag)} == {Event.start(tag)}
