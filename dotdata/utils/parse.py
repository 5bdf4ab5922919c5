"""
Utility functions to read, write and coerce documents for the CLI.
"""
from datetime import date, time
from pathlib import Path
import json
from typing import Any
import yaml

_YAML_SUFFIXES = {".yaml", ".yml"}

def detect_format(path: Path, explicit: str | None = None) -> str:
    """Pick 'json' or 'yaml' for a file, from an explicit choice or its suffix."""
    if explicit:
        return explicit.lower()
    return "yaml" if path.suffix.lower() in _YAML_SUFFIXES else "json"

def load_document(path: Path, fmt: str | None = None) -> dict[str, Any]:
    """Load a JSON or YAML document whose top level must be a mapping."""
    fmt = detect_format(path, fmt)
    text = path.read_text(encoding="utf-8")
    try:
        if fmt == "yaml":
            data = yaml.safe_load(text)
        else:
            data = json.loads(text) if text.strip() else None
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ValueError(f"Failed to parse {fmt.upper()} document {path}: {e}") from e

    if data is None:  # empty file
        return {}
    if not isinstance(data, dict):
        raise ValueError(
            f"Top level of {path} must be a mapping, got {type(data).__name__}"
        )
    return data

def _json_default(value: Any) -> str:
    """JSON fallback for YAML-only scalars: dates become ISO strings."""
    if isinstance(value, (date, time)):
        return value.isoformat()
    return str(value)

def dump_value(value: Any, fmt: str = "json", indent: int = 2) -> str:
    """Serialize any value (document or fragment) for printing."""
    if fmt == "yaml":
        out = yaml.safe_dump(value, indent=indent or None, sort_keys=False,
                             allow_unicode=True).rstrip("\n")
        # Bare scalars come back with an explicit document end marker
        return out.removesuffix("\n...")
    return json.dumps(value, indent=indent or None, ensure_ascii=False,
                      default=_json_default)

def parse_value(text: str) -> Any:
    """
    Coerce a command-line string into a typed value using YAML rules:
    `3` -> 3, `true` -> True, `[1, 2]` -> list, `{a: 1}` -> dict. Anything that
    does not parse stays a plain string.
    """
    if not text.strip():
        return text
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError:
        return text
