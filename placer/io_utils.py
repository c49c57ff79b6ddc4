"""Provides utility functions for loading and saving entity sidecar files.

A sidecar file carries the `AnnotatedLine` records produced when a text file
is stripped, so that the entities can be restored after the clean text has
been transformed by another program. The JSON structure stores the records
under a "lines" key:

    {"lines": [{"line_num": 0, "original": "...", "clean": "...",
                "parsed": true, "error": null,
                "entities": [{"position": 3, "value": "100"}]}]}

`load_annotations` ignores unknown fields, and `save_annotations` writes a
consistent, human-readable layout.
"""
import json
from dataclasses import asdict
from typing import List

from .types import AnnotatedLine, ExtractedEntity

def read_lines(path: str) -> List[str]:
    """Reads a UTF-8 text file into a list of lines without their line endings."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except FileNotFoundError:
        raise FileNotFoundError(f"Text file not found at: {path}")

    if not text:
        return []
    # only newlines end a line; form feeds and unicode separators stay inside it
    if text.endswith("\n"):
        text = text[:-1]
    return text.split("\n")

def write_lines(path: str, lines: List[str]) -> None:
    """Writes lines to a UTF-8 text file, one per line."""
    with open(path, "w", encoding="utf-8") as f:
        for line in lines:
            f.write(line + "\n")

def _load_entities(items, path: str, line_idx: int) -> tuple:
    if not isinstance(items, list):
        raise TypeError(f"Expected 'entities' to be a list for line {line_idx} in {path}")

    entity_fields = ExtractedEntity.get_field_names()
    entities = []
    for item in items:
        if not isinstance(item, dict):
            raise TypeError(f"Entity for line {line_idx} in {path} is not a dictionary.")
        filtered = {k: v for k, v in item.items() if k in entity_fields}
        try:
            entities.append(ExtractedEntity(**filtered))
        except TypeError as e:
            raise TypeError(f"Mismatch between JSON object and ExtractedEntity for line {line_idx} in {path}: {e}")
    return tuple(entities)

def load_annotations(path: str) -> List[AnnotatedLine]:
    """
    Loads a list of AnnotatedLine records from a JSON sidecar file.

    Args:
        path: The path to the sidecar file.

    Returns:
        A list of `AnnotatedLine` instances, in file order.

    Raises:
        FileNotFoundError: If the file at the specified path does not exist.
        ValueError: If the file is not valid JSON.
        TypeError: If the JSON structure is incorrect (e.g., the "lines" key
                   is missing or not a list, or a record is not a dictionary).
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Entity file not found at: {path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Error decoding JSON from {path}: {e}")

    items = data.get("lines") if isinstance(data, dict) else None
    if not isinstance(items, list):
        raise TypeError(f"Expected a 'lines' key with a list of objects in {path}")

    out = []
    line_fields = AnnotatedLine.get_field_names()
    for i, l_dict in enumerate(items):
        if not isinstance(l_dict, dict):
            raise TypeError(f"Line item at index {i} in {path} is not a dictionary.")

        filtered = {k: v for k, v in l_dict.items() if k in line_fields}
        filtered["entities"] = _load_entities(filtered.get("entities", []), path, i)
        try:
            out.append(AnnotatedLine(**filtered))
        except TypeError as e:
            raise TypeError(f"Mismatch between JSON object and AnnotatedLine at index {i} in {path}: {e}")

    return out

def save_annotations(path: str, annotations: List[AnnotatedLine]) -> None:
    """
    Saves a list of AnnotatedLine records to a JSON sidecar file.

    Args:
        path: The destination path for the sidecar file.
        annotations: The records to save.
    """
    data = {"lines": [asdict(a) for a in annotations]}

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
