"""Webhook scaffolder: records the accepted webhook descriptor in PROJECT."""

import logging

import yaml

from webhook_scaffold.config import ProjectConfig
from webhook_scaffold.errors import ScaffolderError
from webhook_scaffold.model.resource import Resource

logger = logging.getLogger(__name__)


class WebhookScaffolder:
    """Persists the webhook for one resource.

    Template rendering is not done here. `boilerplate` is kept for the
    templates that prepend it to generated files, and `force` for the ones
    that overwrite. Webhook types are merged into any recorded descriptor.
    """

    def __init__(self, config: ProjectConfig, boilerplate: str, resource: Resource, force: bool = False) -> None:
        self.config = config
        self.boilerplate = boilerplate
        self.resource = resource
        self.force = force

    def scaffold(self) -> None:
        try:
            self.config.update_resource(self.resource)
            path = self.config.save()
        except (ValueError, OSError, yaml.YAMLError) as e:
            raise ScaffolderError(f"unable to record webhook for {self.resource.gvk}: {e}") from e
        logger.info("recorded webhook for %s in %s", self.resource.gvk, path)
