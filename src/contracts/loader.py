"""Schema loading utilities for solve requests."""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any, Dict

import jsonschema

_SCHEMA_ROOT = Path(__file__).resolve().parent / "schemas"

_schema_cache: Dict[str, Dict[str, Any]] = {}
_compiled_cache: Dict[str, Any] = {}


def load_schema(schema_name: str) -> Dict[str, Any]:
    """Load a JSON schema shipped in the local ``schemas`` directory."""

    if "://" in schema_name:
        raise ValueError("Remote schema paths are not permitted")

    resolved = (_SCHEMA_ROOT / schema_name).resolve()
    if not str(resolved).startswith(str(_SCHEMA_ROOT)):
        raise ValueError("Schema path escapes the schemas directory")

    if schema_name in _schema_cache:
        return copy.deepcopy(_schema_cache[schema_name])

    schema = json.loads(resolved.read_text("utf-8"))
    _schema_cache[schema_name] = schema
    return copy.deepcopy(schema)


def compile_schema(schema_name: str) -> Any:
    """Return a cached Draft 2020-12 validator for ``schema_name``."""

    if schema_name in _compiled_cache:
        return _compiled_cache[schema_name]

    schema_dict = load_schema(schema_name)
    jsonschema.Draft202012Validator.check_schema(schema_dict)
    validator = jsonschema.Draft202012Validator(schema_dict)
    _compiled_cache[schema_name] = validator
    return validator


__all__ = ["compile_schema", "load_schema"]
