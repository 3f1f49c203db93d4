"""PROJECT file loading, querying, and persistence."""

from dataclasses import dataclass, field
import os
from pathlib import Path
import shutil
import tempfile
from typing import Any

import jsonschema
import yaml

from webhook_scaffold.model.resource import GVK, Resource, Webhooks
from webhook_scaffold.schema.validator import validate_project_file

PROJECT_FILENAME = "PROJECT"
PROJECT_FILE_ENV = "WEBHOOK_SCAFFOLD_PROJECT_FILE"
DEFAULT_CONFIG_VERSION = "3"


class UnknownResourceError(LookupError):
    """Raised when a GVK has not been declared in PROJECT."""


@dataclass
class ProjectConfig:
    """Parsed and validated PROJECT configuration."""

    version: str = DEFAULT_CONFIG_VERSION
    domain: str = ""
    repo: str = ""
    project_name: str = ""
    # Kept in the shape it was loaded with: a single plugin key or a list of them.
    layout: str | list[str] = field(default_factory=list)
    # None when PROJECT does not set it; an explicit false is written back.
    multigroup: bool | None = None
    resources: list[Resource] = field(default_factory=list)
    # Top-level keys not modelled here (plugins, componentConfig, ...), preserved on save.
    extra: dict[str, Any] = field(default_factory=dict)
    path: Path | None = None

    def get_resource(self, gvk: GVK) -> Resource:
        """Return the declared resource with this GVK; raise UnknownResourceError if absent."""
        for resource in self.resources:
            if resource.gvk == gvk:
                return resource
        raise UnknownResourceError(f"resource {gvk} not found in {PROJECT_FILENAME}")

    def has_resource(self, gvk: GVK) -> bool:
        return any(r.gvk == gvk for r in self.resources)

    def is_webhook_version_compatible(self, version: str) -> bool:
        """True unless some resource already committed to a different webhook version."""
        for resource in self.resources:
            if resource.webhooks is None or not resource.webhooks.webhook_version:
                continue
            if resource.webhooks.webhook_version != version:
                return False
        return True

    def update_resource(self, resource: Resource) -> None:
        """Add the resource, or merge its webhooks into the already declared one."""
        for existing in self.resources:
            if existing.gvk != resource.gvk:
                continue
            if resource.plural and not existing.plural:
                existing.plural = resource.plural
            if resource.path and not existing.path:
                existing.path = resource.path
            if resource.webhooks is not None:
                if existing.webhooks is None:
                    existing.webhooks = Webhooks()
                existing.webhooks.update(resource.webhooks)
            return
        self.resources.append(resource)

    def resource_path(self, group: str, version: str) -> str:
        """Go import path of the API package for group/version."""
        if self.multigroup and group:
            rel = f"apis/{group}/{version}"
        else:
            rel = f"api/{version}"
        return f"{self.repo}/{rel}" if self.repo else rel

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = dict(self.extra)
        if self.domain:
            data["domain"] = self.domain
        if self.layout:
            data["layout"] = self.layout if isinstance(self.layout, str) else list(self.layout)
        if self.multigroup is not None:
            data["multigroup"] = self.multigroup
        if self.project_name:
            data["projectName"] = self.project_name
        if self.repo:
            data["repo"] = self.repo
        if self.resources:
            data["resources"] = [r.to_dict() for r in self.resources]
        data["version"] = self.version
        return data

    def save(self, path: Path | None = None) -> Path:
        """Write PROJECT back to disk; defaults to the path it was loaded from."""
        target = path or self.path
        if target is None:
            raise ValueError("no PROJECT path to save to")
        text = yaml.safe_dump(self.to_dict(), default_flow_style=False, sort_keys=True)
        # Write beside the target and swap it in, so PROJECT is never left truncated.
        fd, tmp = tempfile.mkstemp(dir=Path(target).parent, prefix=".PROJECT.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
            if Path(target).exists():
                shutil.copymode(target, tmp)
            os.replace(tmp, target)
        except OSError:
            Path(tmp).unlink(missing_ok=True)
            raise
        self.path = Path(target)
        return self.path

    @classmethod
    def from_dict(cls, data: dict[str, Any], path: Path | None = None) -> "ProjectConfig":
        known = {"version", "domain", "repo", "projectName", "layout", "multigroup", "resources"}
        return cls(
            version=str(data["version"]),
            domain=data.get("domain", ""),
            repo=data.get("repo", ""),
            project_name=data.get("projectName", ""),
            layout=data.get("layout") or [],
            multigroup=data.get("multigroup"),
            resources=[Resource.from_dict(r) for r in data.get("resources") or []],
            extra={k: v for k, v in data.items() if k not in known},
            path=path,
        )

    @classmethod
    def from_file(cls, path: str | Path) -> "ProjectConfig":
        """Load and validate a PROJECT file."""
        if not Path(path).exists():
            raise SystemExit(f"{PROJECT_FILENAME} file not found: {path}")

        with open(path, encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise SystemExit(f"unable to parse {path}: {e}") from e
        if not isinstance(data, dict):
            raise SystemExit(f"unable to parse {path}: expected a mapping at the top level")

        try:
            validate_project_file(data)
        except (jsonschema.ValidationError, ValueError) as e:
            raise SystemExit(str(e)) from e

        return cls.from_dict(data, path=Path(path))


def load_project_config(project_dir: Path | None = None) -> ProjectConfig:
    """Load PROJECT from WEBHOOK_SCAFFOLD_PROJECT_FILE, else from project_dir (default: cwd)."""
    override = os.environ.get(PROJECT_FILE_ENV)
    if override:
        return ProjectConfig.from_file(override)
    root = project_dir or Path.cwd()
    return ProjectConfig.from_file(root / PROJECT_FILENAME)
