"""The `create webhook` checks, registered in chain order."""

from webhook_scaffold.config import PROJECT_FILENAME
from webhook_scaffold.errors import (
    InvalidOptionError,
    InvalidResourceError,
    NoWebhookTypeSelectedError,
    ResourceNotFoundError,
    WebhookAlreadyExistsError,
    WebhookVersionConflictError,
)
from webhook_scaffold.validation.context import ValidationContext
from webhook_scaffold.validation.registry import Step, register

EXISTING_RESOURCE_KEY = "resource.existing"


@register("options", step=Step.OPTIONS)
def check_options(ctx: ValidationContext) -> None:
    try:
        ctx.options.validate()
    except ValueError as e:
        raise InvalidOptionError(f"invalid options: {e}") from e


@register("resource", step=Step.RESOURCE)
def check_resource(ctx: ValidationContext) -> None:
    try:
        ctx.resource.validate()
    except ValueError as e:
        raise InvalidResourceError(f"invalid resource {ctx.resource.gvk}: {e}") from e


@register("webhookTypes", step=Step.WEBHOOK_TYPES)
def check_webhook_types(ctx: ValidationContext) -> None:
    """At least one of defaulting, validation, conversion must be enabled."""
    r = ctx.resource
    if not r.has_defaulting_webhook() and not r.has_validation_webhook() and not r.has_conversion_webhook():
        raise NoWebhookTypeSelectedError(
            f"{ctx.command_name} create webhook requires at least one of --defaulting,"
            " --programmatic-validation and --conversion to be true"
        )


@register("resourceExists", step=Step.RESOURCE_EXISTS)
def check_resource_exists(ctx: ValidationContext) -> None:
    """The API must have been created before a webhook can be added to it.

    Any lookup failure is reported as not found.
    """
    try:
        existing = ctx.config.get_resource(ctx.resource.gvk)
    except (LookupError, ValueError) as e:
        raise ResourceNotFoundError(
            f"{ctx.command_name} create webhook requires a previously created API: "
            f"{ctx.resource.gvk} is not declared in {PROJECT_FILENAME}"
        ) from e
    ctx.set(EXISTING_RESOURCE_KEY, existing)


@register("notDuplicated", step=Step.NOT_DUPLICATED)
def check_not_duplicated(ctx: ValidationContext) -> None:
    existing = ctx.require(EXISTING_RESOURCE_KEY)
    if existing.has_webhooks() and not ctx.options.force:
        raise WebhookAlreadyExistsError(
            f"webhook resource already exists for {ctx.resource.gvk} (use --force to overwrite)"
        )


@register("webhookVersion", step=Step.WEBHOOK_VERSION)
def check_webhook_version(ctx: ValidationContext) -> None:
    """All resources in a project share one webhook config API version."""
    version = ctx.resource.webhooks.webhook_version if ctx.resource.webhooks else ""
    if not ctx.config.is_webhook_version_compatible(version):
        raise WebhookVersionConflictError(
            f"only one webhook version can be used for all resources, cannot add {version!r}"
        )
