"""Validate a PROJECT file against the JSON Schema for its declared version."""

import json
from pathlib import Path

import jsonschema

_SCHEMA_FILES = {"3": "project-config-v3.json"}


def _schema_dir() -> Path:
    """Directory containing schema files (webhook_scaffold/schema/)."""
    return Path(__file__).resolve().parent


def load_schema(version: str) -> dict:
    """Load the JSON Schema for the given PROJECT config version (e.g. '3')."""
    name = _SCHEMA_FILES.get(version)
    if name is None:
        raise ValueError(f"Unsupported PROJECT version: {version}")
    path = _schema_dir() / name
    if not path.exists():
        raise FileNotFoundError(f"Schema not found: {path}")
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def validate_project_file(data: dict) -> None:
    """Validate a parsed PROJECT file (dict) against its version's schema.

    Raises:
        jsonschema.ValidationError: If validation fails. Message includes
            all error details. Caller may convert to SystemExit for CLI.
        ValueError: If the version is not supported.
    """
    version = data.get("version")
    if not version:
        raise jsonschema.ValidationError("Missing required field: version")
    schema = load_schema(str(version))
    validator = jsonschema.Draft202012Validator(schema)
    errors = list(validator.iter_errors(data))
    if errors:
        lines = ["PROJECT validation failed:"]
        for i, err in enumerate(errors[:10], 1):
            path = ".".join(str(p) for p in err.absolute_path) if err.absolute_path else "(root)"
            lines.append(f"  {i}. {path}: {err.message}")
        if len(errors) > 10:
            lines.append(f"  ... and {len(errors) - 10} more errors")
        raise jsonschema.ValidationError("\n".join(lines))
