from placer.parser import annotate
from placer.substitute import is_placeholder, restore_line, substitute


def test_substitute_replaces_in_order():
    assert substitute("the $num and $num", ["100", "200"]) == "the 100 and 200"


def test_substitute_deletes_placeholders_without_values():
    assert substitute("the $num and $num", ["100"]) == "the 100 and"
    assert substitute("$num is $num here", []) == "is here"


def test_substitute_ignores_surplus_values():
    assert substitute("only $num", ["1", "2"]) == "only 1"


def test_substitute_leaves_non_placeholders_alone():
    line = "cost $5 or $ or $x and $num"

    assert substitute(line, ["9"]) == "cost $5 or $ or $x and 9"


def test_substitute_normalizes_whitespace():
    assert substitute("  a   $num\tb ", ["1"]) == "a 1 b"


def test_is_placeholder():
    assert is_placeholder("$num")
    assert is_placeholder("$date.")
    assert not is_placeholder("$n")
    assert not is_placeholder("$12")
    assert not is_placeholder("num")
    assert not is_placeholder("#num")
    assert is_placeholder("#num", sentinel="#")


def test_restore_line_uses_entities_in_source_order():
    annotated = annotate('<ne entity="100">$num</ne> plus <ne entity="200">$num</ne>')

    assert restore_line("$num et $num", annotated) == "100 et 200"
