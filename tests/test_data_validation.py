from placer.data_validation import count_placeholders, validate
from placer.parser import annotate


def test_count_placeholders():
    assert count_placeholders("$num and $date but not $5") == 2


def test_validate_clean_line_has_no_issues():
    annotated = annotate('<ne entity="1">$num</ne> day')

    assert validate(annotated, "$num jour") == {"issue_count": 0, "issues": []}


def test_validate_flags_count_mismatches():
    annotated = annotate('<ne entity="1">$num</ne> and <ne entity="2">$num</ne>')

    deficit = validate(annotated, "$num only")
    surplus = validate(annotated, "$num $num $num")

    assert [i["type"] for i in deficit["issues"]] == ["placeholder_deficit_error"]
    assert [i["type"] for i in surplus["issues"]] == ["placeholder_surplus_error"]


def test_validate_flags_parse_failures_and_empty_values():
    broken = annotate("<b> $num")
    empty = annotate('<ne translation="$num">$num</ne>')

    broken_types = {i["type"] for i in validate(broken, "$num")["issues"]}
    empty_types = {i["type"] for i in validate(empty, "$num")["issues"]}

    assert broken_types == {"parse_failure_warning", "placeholder_surplus_error"}
    assert empty_types == {"missing_entity_value_warning"}
