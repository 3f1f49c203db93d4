"""Tests for PROJECT schema validation."""

from pathlib import Path

import jsonschema
import pytest
import yaml

from webhook_scaffold.schema.validator import load_schema, validate_project_file


def test_all_fixtures_validate() -> None:
    """All fixtures must pass schema validation (keeps fixtures in sync with schema)."""
    fixture_dir = Path(__file__).resolve().parent.parent / "fixtures"
    paths = sorted(fixture_dir.glob("*.yaml"))
    assert paths
    for path in paths:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        validate_project_file(data)


def test_load_schema_v3() -> None:
    schema = load_schema("3")
    assert schema["properties"]["version"]["const"] == "3"


def test_validate_project_file_missing_version() -> None:
    """Missing version raises ValidationError."""
    with pytest.raises(jsonschema.ValidationError) as exc_info:
        validate_project_file({"domain": "my.domain"})
    assert "version" in str(exc_info.value)


def test_validate_project_file_unsupported_version() -> None:
    with pytest.raises(ValueError, match="Unsupported PROJECT version"):
        validate_project_file({"version": "2", "domain": "my.domain"})


def test_validate_project_file_resource_missing_kind() -> None:
    data = {"version": "3", "resources": [{"group": "ship", "version": "v1"}]}
    with pytest.raises(jsonschema.ValidationError) as exc_info:
        validate_project_file(data)
    msg = str(exc_info.value)
    assert "validation failed" in msg.lower()
    assert "kind" in msg


def test_validate_project_file_rejects_unknown_webhook_version() -> None:
    data = {
        "version": "3",
        "resources": [
            {"group": "ship", "version": "v1", "kind": "Frigate", "webhooks": {"webhookVersion": "v2"}},
        ],
    }
    with pytest.raises(jsonschema.ValidationError) as exc_info:
        validate_project_file(data)
    assert "resources.0.webhooks.webhookVersion" in str(exc_info.value)


def test_validate_project_file_rejects_resource_extra_field() -> None:
    data = {
        "version": "3",
        "resources": [{"version": "v1", "kind": "Frigate", "typoKey": "x"}],
    }
    with pytest.raises(jsonschema.ValidationError) as exc_info:
        validate_project_file(data)
    assert "typo" in str(exc_info.value).lower() or "additional" in str(exc_info.value).lower()


def test_validate_project_file_caps_reported_errors() -> None:
    data = {
        "version": "3",
        "resources": [{"version": "v1", "kind": "Frigate", f"bad{i}": 1, "webhooks": {"x": 1}} for i in range(12)],
    }
    with pytest.raises(jsonschema.ValidationError) as exc_info:
        validate_project_file(data)
    assert "more errors" in str(exc_info.value)
