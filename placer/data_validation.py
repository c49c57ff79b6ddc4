from __future__ import annotations
from typing import Any, Dict, List

from .substitute import is_placeholder
from .types import AnnotatedLine

def count_placeholders(line: str, sentinel: str = "$") -> int:
    """Counts the placeholder words in a line."""
    return sum(1 for field in line.split() if is_placeholder(field, sentinel))

def validate(annotated: AnnotatedLine, transformed_line: str, sentinel: str = "$") -> Dict[str, Any]:
    """
    Checks that a transformed line can be restored from its annotations.

    Substitution is position-agnostic, so it silently produces wrong output
    when the transformation changed the number of placeholders. This function
    reports those cases before the substitution runs:
    -   The source line could not be parsed and was passed through as-is.
    -   An entity has an empty value (missing or malformed attribute).
    -   More entities than placeholders: trailing entities will be lost.
    -   More placeholders than entities: trailing placeholders will be deleted.

    Args:
        annotated: The record produced when the source line was stripped.
        transformed_line: The external pipeline's output for that line.
        sentinel: First character of a placeholder word.

    Returns:
        A dictionary with the total `issue_count` and a list of `issues`,
        each a dictionary describing one problem.
    """
    issues: List[Dict[str, Any]] = []

    if not annotated.parsed:
        issues.append({
            "type": "parse_failure_warning",
            "line_num": annotated.line_num,
            "error": annotated.error,
            "message": f"Line {annotated.line_num} was passed through unparsed ({annotated.error})."
        })

    for entity in annotated.entities:
        if not entity.value:
            issues.append({
                "type": "missing_entity_value_warning",
                "line_num": annotated.line_num,
                "position": entity.position,
                "message": f"Entity at word {entity.position} of line {annotated.line_num} has no value."
            })

    n_entities = len(annotated.entities)
    n_placeholders = count_placeholders(transformed_line, sentinel)
    if n_entities > n_placeholders:
        issues.append({
            "type": "placeholder_deficit_error",
            "line_num": annotated.line_num,
            "entities": n_entities,
            "placeholders": n_placeholders,
            "message": f"Line {annotated.line_num} has {n_entities} entities but only {n_placeholders} placeholders."
        })
    elif n_placeholders > n_entities:
        issues.append({
            "type": "placeholder_surplus_error",
            "line_num": annotated.line_num,
            "entities": n_entities,
            "placeholders": n_placeholders,
            "message": f"Line {annotated.line_num} has {n_placeholders} placeholders but only {n_entities} entities."
        })

    return {"issue_count": len(issues), "issues": issues}
