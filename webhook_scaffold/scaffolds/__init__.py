"""Scaffolders invoked once validation has passed."""

from webhook_scaffold.scaffolds.webhook import WebhookScaffolder

__all__ = ["WebhookScaffolder"]
