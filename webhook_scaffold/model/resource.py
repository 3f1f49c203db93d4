"""API resource model: GVK identity, webhook descriptor, and the project-held resource."""

from dataclasses import dataclass, field
import re
from typing import Any

WEBHOOK_VERSIONS = ("v1", "v1beta1")

_VERSION_RE = re.compile(r"^v\d+(?:alpha\d+|beta\d+)?$")
_DNS1123_LABEL_RE = re.compile(r"^[a-z0-9]([-a-z0-9]*[a-z0-9])?$")
_DNS1035_LABEL_RE = re.compile(r"^[a-z]([-a-z0-9]*[a-z0-9])?$")
_DNS1123_LABEL_MAX = 63
_DNS1123_SUBDOMAIN_MAX = 253


def is_dns1123_label(value: str) -> bool:
    return len(value) <= _DNS1123_LABEL_MAX and bool(_DNS1123_LABEL_RE.match(value))


def is_dns1123_subdomain(value: str) -> bool:
    if not value or len(value) > _DNS1123_SUBDOMAIN_MAX:
        return False
    return all(_DNS1123_LABEL_RE.match(part) for part in value.split("."))


def is_dns1035_label(value: str) -> bool:
    return len(value) <= _DNS1123_LABEL_MAX and bool(_DNS1035_LABEL_RE.match(value))


@dataclass(frozen=True)
class GVK:
    """Group-Version-Kind identity of an API resource."""

    group: str = ""
    domain: str = ""
    version: str = ""
    kind: str = ""

    @property
    def qualified_group(self) -> str:
        """Group joined with the domain; either part alone when the other is empty."""
        if not self.group:
            return self.domain
        if not self.domain:
            return self.group
        return f"{self.group}.{self.domain}"

    def validate(self) -> None:
        """Raise ValueError describing the first invalid component."""
        if not self.group and not self.domain:
            raise ValueError("either group or domain must not be empty")
        if not is_dns1123_subdomain(self.qualified_group):
            raise ValueError(
                f"invalid group {self.qualified_group!r}: must be a valid DNS-1123 subdomain"
            )

        if not self.version:
            raise ValueError("version cannot be empty")
        if not _VERSION_RE.match(self.version):
            raise ValueError(
                f"invalid version {self.version!r}: must match {_VERSION_RE.pattern}"
            )

        if not self.kind:
            raise ValueError("kind cannot be empty")
        if not self.kind[0].isupper():
            raise ValueError(f"invalid kind {self.kind!r}: must start with an uppercase character")
        if not is_dns1035_label(self.kind.lower()):
            raise ValueError(
                f"invalid kind {self.kind!r}: lowercase form must be a valid DNS-1035 label"
            )

    def __str__(self) -> str:
        return f"{self.qualified_group}/{self.version}, Kind={self.kind}"


@dataclass
class Webhooks:
    """Enabled webhook types plus the {Mutating,Validating}WebhookConfiguration API version."""

    webhook_version: str = ""
    defaulting: bool = False
    validation: bool = False
    conversion: bool = False

    def has_any_type(self) -> bool:
        return self.defaulting or self.validation or self.conversion

    def is_empty(self) -> bool:
        return not self.webhook_version and not self.has_any_type()

    def validate(self) -> None:
        if self.webhook_version and self.webhook_version not in WEBHOOK_VERSIONS:
            raise ValueError(
                f"invalid webhook version {self.webhook_version!r}: "
                f"must be one of {', '.join(WEBHOOK_VERSIONS)}"
            )

    def update(self, other: "Webhooks") -> None:
        """Merge another descriptor into this one.

        Enabled types accumulate. The webhook version is adopted when unset here;
        a different non-empty version raises ValueError.
        """
        if other.webhook_version:
            if not self.webhook_version:
                self.webhook_version = other.webhook_version
            elif self.webhook_version != other.webhook_version:
                raise ValueError(
                    f"webhook versions do not match: {self.webhook_version!r} != {other.webhook_version!r}"
                )
        self.defaulting = self.defaulting or other.defaulting
        self.validation = self.validation or other.validation
        self.conversion = self.conversion or other.conversion

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.webhook_version:
            data["webhookVersion"] = self.webhook_version
        if self.defaulting:
            data["defaulting"] = True
        if self.validation:
            data["validation"] = True
        if self.conversion:
            data["conversion"] = True
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Webhooks":
        return cls(
            webhook_version=data.get("webhookVersion", ""),
            defaulting=data.get("defaulting", False),
            validation=data.get("validation", False),
            conversion=data.get("conversion", False),
        )


@dataclass
class Resource:
    """An API resource as declared in PROJECT."""

    gvk: GVK
    plural: str = ""
    path: str = ""
    webhooks: Webhooks | None = None
    # PROJECT keys this tool does not interpret (api, controller); kept for round-tripping.
    extra: dict[str, Any] = field(default_factory=dict)

    def validate(self) -> None:
        """Raise ValueError when the GVK, plural, or webhook descriptor is malformed."""
        self.gvk.validate()
        if self.plural and not is_dns1123_label(self.plural):
            raise ValueError(f"invalid plural {self.plural!r}: must be a valid DNS-1123 label")
        if self.webhooks is not None:
            self.webhooks.validate()

    def has_defaulting_webhook(self) -> bool:
        return self.webhooks is not None and self.webhooks.defaulting

    def has_validation_webhook(self) -> bool:
        return self.webhooks is not None and self.webhooks.validation

    def has_conversion_webhook(self) -> bool:
        return self.webhooks is not None and self.webhooks.conversion

    def has_webhooks(self) -> bool:
        return self.webhooks is not None and not self.webhooks.is_empty()

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = dict(self.extra)
        if self.gvk.domain:
            data["domain"] = self.gvk.domain
        if self.gvk.group:
            data["group"] = self.gvk.group
        data["kind"] = self.gvk.kind
        if self.path:
            data["path"] = self.path
        if self.plural:
            data["plural"] = self.plural
        data["version"] = self.gvk.version
        if self.webhooks is not None and not self.webhooks.is_empty():
            data["webhooks"] = self.webhooks.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Resource":
        known = {"group", "domain", "version", "kind", "plural", "path", "webhooks"}
        webhooks_raw = data.get("webhooks")
        return cls(
            gvk=GVK(
                group=data.get("group", ""),
                domain=data.get("domain", ""),
                version=data.get("version", ""),
                kind=data.get("kind", ""),
            ),
            plural=data.get("plural", ""),
            path=data.get("path", ""),
            webhooks=Webhooks.from_dict(webhooks_raw) if webhooks_raw else None,
            extra={k: v for k, v in data.items() if k not in known},
        )
