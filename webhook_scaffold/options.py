"""Command options for `create webhook` and the resource built from them."""

import argparse
from dataclasses import dataclass

from webhook_scaffold.config import ProjectConfig
from webhook_scaffold.model.resource import GVK, WEBHOOK_VERSIONS, Resource, Webhooks

# Default {Mutating,Validating}WebhookConfiguration API version to scaffold.
DEFAULT_WEBHOOK_VERSION = "v1"


@dataclass
class CommandOptions:
    """Raw user input. Mutated only while flags are bound, read-only afterwards."""

    group: str = ""
    version: str = ""
    kind: str = ""
    plural: str = ""
    webhook_version: str = DEFAULT_WEBHOOK_VERSION
    do_defaulting: bool = False
    do_validation: bool = False
    do_conversion: bool = False
    force: bool = False
    domain: str = ""

    @classmethod
    def from_args(cls, args: argparse.Namespace, config: ProjectConfig) -> "CommandOptions":
        """Bind parsed flags; the domain always comes from the project."""
        return cls(
            group=args.group,
            version=args.version,
            kind=args.kind,
            plural=args.plural,
            webhook_version=args.webhook_version,
            do_defaulting=args.defaulting,
            do_validation=args.programmatic_validation,
            do_conversion=args.conversion,
            force=args.force,
            domain=config.domain,
        )

    def validate(self) -> None:
        """Raise ValueError for missing or malformed flag values."""
        # A leading '-' means the parser took the next flag as this flag's value.
        # None of these fields accept it, so check it before reporting empties.
        for flag, value in (("group", self.group), ("version", self.version), ("kind", self.kind)):
            if value.startswith("-"):
                raise ValueError(f"{flag} flag present but empty")

        if not self.version:
            raise ValueError("version cannot be empty")
        if not self.kind:
            raise ValueError("kind cannot be empty")

        if self.webhook_version and self.webhook_version not in WEBHOOK_VERSIONS:
            raise ValueError(f"Webhook version must be one of: {', '.join(WEBHOOK_VERSIONS)}")

    def new_resource(self, config: ProjectConfig) -> Resource:
        """Build the resource these options describe. No validation happens here."""
        return Resource(
            gvk=GVK(
                group=self.group,
                domain=self.domain,
                version=self.version,
                kind=self.kind,
            ),
            plural=self.plural,
            path=config.resource_path(self.group, self.version),
            webhooks=Webhooks(
                webhook_version=self.webhook_version,
                defaulting=self.do_defaulting,
                validation=self.do_validation,
                conversion=self.do_conversion,
            ),
        )
