"""Validation context: project config, options, the built resource, and values shared between checks."""

from dataclasses import dataclass, field
from typing import Any

from webhook_scaffold.config import ProjectConfig
from webhook_scaffold.model.resource import Resource
from webhook_scaffold.options import CommandOptions


@dataclass
class ValidationContext:
    """Context passed to every check. Checks read config but never modify it."""

    config: ProjectConfig
    options: CommandOptions
    resource: Resource
    command_name: str = "webhook-scaffold"
    _values: dict[str, Any] = field(default_factory=dict)

    def set(self, key: str, value: Any) -> None:
        """Store a value for later checks."""
        self._values[key] = value

    def require(self, key: str) -> Any:
        """Retrieve a value; raise RuntimeError with available keys if missing."""
        if key not in self._values:
            available = ", ".join(sorted(self._values.keys())) or "(none)"
            raise RuntimeError(
                f"missing required key: {key!r}. Available keys: {available}"
            )
        return self._values[key]
