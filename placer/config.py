"""Manages the loading and validation of placeholder configuration.

This module defines the `Config` dataclass, the single typed container for the
settings that control how entity markup is parsed and how placeholders are
restored. The `load_config` function reads them from a `config.yaml` file and
fills in defaults for anything the file leaves out.
"""
from __future__ import annotations
from dataclasses import dataclass
import yaml

__all__ = ["Config", "load_config", "ON_ERROR_POLICIES"]

ON_ERROR_POLICIES = ("passthrough", "reject")

@dataclass
class Config:
    """
    A typed configuration object for the markup parser and the substitutor.

    Attributes:
        using_placeholders: When false, transformed lines are written as-is and
                            no placeholder substitution takes place.
        on_error: What to do with a line whose markup cannot be parsed.
                  'passthrough' keeps the original line with no entities,
                  'reject' raises the `MarkupError` to the caller.
        entity_tag: The tag name whose attribute is extracted, normally 'ne'.
        entity_attribute: The attribute holding the entity value.
        sentinel: The first character of a placeholder word, e.g. '$' in '$num'.
        log_level: Logging level name used by the command-line tools.
    """
    using_placeholders: bool = True
    on_error: str = "passthrough"
    entity_tag: str = "ne"
    entity_attribute: str = "entity"
    sentinel: str = "$"
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.on_error not in ON_ERROR_POLICIES:
            raise ValueError(
                f"on_error must be one of {', '.join(ON_ERROR_POLICIES)}, got {self.on_error!r}"
            )
        if len(self.sentinel) != 1:
            raise ValueError(f"sentinel must be a single character, got {self.sentinel!r}")
        if not self.entity_tag:
            raise ValueError("entity_tag must not be empty")

def load_config(path: str = "config.yaml") -> Config:
    """
    Loads and validates a YAML configuration file into a Config object.

    Keys missing from the file fall back to the dataclass defaults; unknown
    keys are ignored.

    Args:
        path: The path to the `config.yaml` file.

    Returns:
        A fully populated and validated `Config` object.

    Raises:
        FileNotFoundError: If the specified file cannot be found.
        ValueError: If the YAML cannot be parsed or a value is invalid.
        TypeError: If the root of the YAML file is not a dictionary.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            y = yaml.safe_load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Configuration file not found at: {path}")
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML file at {path}: {e}")

    if y is None:
        y = {}
    if not isinstance(y, dict):
        raise TypeError(f"Configuration file {path} must be a dictionary.")

    defaults = Config()
    using_placeholders = y.get("using_placeholders", defaults.using_placeholders)
    if not isinstance(using_placeholders, bool):
        raise ValueError(
            f"using_placeholders in {path} must be true or false, got {using_placeholders!r}"
        )

    return Config(
        using_placeholders=using_placeholders,
        on_error=str(y.get("on_error", defaults.on_error)),
        entity_tag=str(y.get("entity_tag", defaults.entity_tag)),
        entity_attribute=str(y.get("entity_attribute", defaults.entity_attribute)),
        sentinel=str(y.get("sentinel", defaults.sentinel)),
        log_level=str(y.get("log_level", defaults.log_level)).upper(),
    )
