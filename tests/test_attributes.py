import logging

from placer.attributes import extract_attribute


def test_extract_attribute_reads_quoted_value():
    content = 'translation="$num" entity="100"'

    assert extract_attribute(content, "entity") == "100"
    assert extract_attribute(content, "translation") == "$num"


def test_extract_attribute_missing_returns_none():
    assert extract_attribute('translation="$num"', "entity") is None


def test_extract_attribute_keeps_escaped_quotes():
    content = 'entity="say \\"hi\\"" translation="$x"'

    assert extract_attribute(content, "entity") == 'say \\"hi\\"'


def test_extract_attribute_empty_value():
    assert extract_attribute('entity=""', "entity") == ""


def test_extract_attribute_unterminated_value_is_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="placer.attributes"):
        assert extract_attribute('entity="100', "entity") is None

    assert "Malformed attribute" in caplog.text


def test_extract_attribute_escaped_quote_without_terminator_ends_value():
    assert extract_attribute('entity="abc\\"', "entity") == "abc\\"
