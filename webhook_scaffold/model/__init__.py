"""Resource model shared by options, project config, and validation."""

from webhook_scaffold.model.resource import GVK, WEBHOOK_VERSIONS, Resource, Webhooks

__all__ = ["GVK", "WEBHOOK_VERSIONS", "Resource", "Webhooks"]
