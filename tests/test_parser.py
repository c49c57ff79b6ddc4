import pytest

from placer.config import Config
from placer.errors import (
    MalformedMarkup,
    MarkupError,
    MismatchedTagNames,
    MultiWordEntitySpan,
    UnclosedTag,
    UnmatchedClose,
    UnsupportedUnaryTag,
)
from placer.parser import annotate, strip_and_extract
from placer.types import ExtractedEntity


def test_strip_and_extract_single_entity():
    line = 'the price is <ne translation="$num" entity="100">$num</ne> dollars'

    clean, entities = strip_and_extract(line)

    assert clean == "the price is $num dollars"
    assert entities == [ExtractedEntity(3, "100")]


def test_strip_and_extract_keeps_source_order():
    line = '<ne entity="100">$num</ne> and <ne entity="200">$num</ne>'

    clean, entities = strip_and_extract(line)

    assert clean == "$num and $num"
    assert [e.value for e in entities] == ["100", "200"]
    assert [e.position for e in entities] == [0, 2]


def test_strip_and_extract_line_without_markup_is_unchanged():
    line = "  plain   text with $num but no tags "

    assert strip_and_extract(line) == (line, [])


def test_strip_and_extract_inserts_space_where_tags_glued_words():
    clean, entities = strip_and_extract("a<b>c</b>d")

    assert clean == "a c d"
    assert entities == []


def test_strip_and_extract_nested_entity_inside_other_tag():
    clean, entities = strip_and_extract('<b><ne entity="5">$num</ne></b> items')

    assert clean == "$num items"
    assert entities == [ExtractedEntity(0, "5")]


def test_strip_and_extract_ignores_non_tag_angle_brackets():
    clean, entities = strip_and_extract("a <3> b")

    assert clean == "a <3> b"
    assert entities == []


def test_strip_and_extract_missing_attribute_gives_empty_value():
    _, entities = strip_and_extract('<ne translation="$num">$num</ne>')

    assert entities == [ExtractedEntity(0, "")]


def test_strip_and_extract_escaped_quote_in_value():
    _, entities = strip_and_extract('he said <ne entity="say \\"hi\\"">$q</ne>')

    assert entities == [ExtractedEntity(2, 'say \\"hi\\"')]


def test_strip_and_extract_custom_entity_tag():
    _, entities = strip_and_extract('<date value="2020">$date</date>', "date", "value")

    assert entities == [ExtractedEntity(0, "2020")]


def test_multi_word_entity_span_fails():
    with pytest.raises(MultiWordEntitySpan) as excinfo:
        strip_and_extract('<ne entity="x">two words</ne>')

    assert (excinfo.value.start, excinfo.value.end) == (0, 2)


def test_empty_entity_span_fails():
    with pytest.raises(MultiWordEntitySpan):
        strip_and_extract('a <ne entity="x"></ne> b')


def test_crossing_tags_fail():
    with pytest.raises(MismatchedTagNames) as excinfo:
        strip_and_extract("<a><b>x</a></b>")

    assert excinfo.value.expected == "b"
    assert excinfo.value.found == "a"


def test_close_without_open_fails():
    with pytest.raises(UnmatchedClose):
        strip_and_extract("x </b>")


def test_unclosed_tag_fails():
    with pytest.raises(UnclosedTag) as excinfo:
        strip_and_extract("<b> test")

    assert excinfo.value.open_tags == ["b"]


def test_unterminated_tag_fails():
    with pytest.raises(MalformedMarkup):
        strip_and_extract("a <b test")


def test_unary_tag_is_rejected():
    with pytest.raises(UnsupportedUnaryTag):
        strip_and_extract("a <br/> b")


def test_annotate_success_owns_its_entities():
    annotated = annotate('<ne entity="7">$num</ne> days', line_num=4)

    assert annotated.parsed
    assert annotated.line_num == 4
    assert annotated.clean == "$num days"
    assert annotated.values == ["7"]


def test_annotate_passthrough_keeps_original_line():
    line = "<a><b>x</a></b>"

    annotated = annotate(line)

    assert not annotated.parsed
    assert annotated.clean == line
    assert annotated.entities == ()
    assert annotated.error == "MismatchedTagNames"


def test_annotate_reject_policy_raises():
    with pytest.raises(MarkupError):
        annotate("<b> test", cfg=Config(on_error="reject"))


def test_close_tag_with_space_before_name_fails():
    with pytest.raises(MismatchedTagNames) as excinfo:
        strip_and_extract('<ne entity="1">$x</ ne>')

    assert excinfo.value.expected == "ne"
    assert excinfo.value.found == ""


def test_tag_content_starts_after_first_whitespace():
    _, entities = strip_and_extract('<ne\tentity="42">$num</ne>')

    assert entities == [ExtractedEntity(0, "42")]
