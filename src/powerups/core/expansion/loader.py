"""Variables files: flat JSON objects of string values."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema

from powerups.core.exceptions import VariablesParseError
from powerups.core.utils.io import PathLike, read_json
from powerups.data import read_yaml as read_data_yaml

VARIABLES_SCHEMA = "variables.schema.yaml"


def _variables_schema() -> Dict[str, Any]:
    return read_data_yaml("schemas", VARIABLES_SCHEMA)


def validate_variables(data: Any, *, source: str = "<memory>") -> Dict[str, str]:
    """Check that ``data`` is a mapping of strings to strings.

    Raises:
        VariablesParseError: If the payload does not match the schema
    """
    validator = jsonschema.Draft202012Validator(_variables_schema())
    errors = sorted(validator.iter_errors(data), key=lambda e: list(e.path))
    if errors:
        first = errors[0]
        location = "/".join(str(p) for p in first.path) or "<root>"
        raise VariablesParseError(
            f"Invalid variables in {source} at {location}: {first.message}",
            context={"path": source, "location": location},
        )
    return dict(data)


def load_variables_file(path: PathLike) -> Dict[str, str]:
    """Load a variables file.

    Raises:
        FileNotFoundError: If the file does not exist
        VariablesParseError: If the file is not valid JSON or not a string map
    """
    path = Path(path)
    try:
        data = read_json(path)
    except json.JSONDecodeError as exc:
        raise VariablesParseError(
            f"Malformed JSON in {path}: {exc}", context={"path": str(path)}
        ) from exc
    return validate_variables(data, source=str(path))


__all__ = ["VARIABLES_SCHEMA", "validate_variables", "load_variables_file"]
