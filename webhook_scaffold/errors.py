"""Error taxonomy for `create webhook`. Every error is terminal for the invocation."""

from enum import Enum


class ErrorKind(str, Enum):
    """Failure kinds surfaced to the CLI boundary."""

    INVALID_OPTION = "InvalidOption"
    INVALID_RESOURCE = "InvalidResource"
    NO_WEBHOOK_TYPE_SELECTED = "NoWebhookTypeSelected"
    RESOURCE_NOT_FOUND = "ResourceNotFound"
    WEBHOOK_ALREADY_EXISTS = "WebhookAlreadyExists"
    WEBHOOK_VERSION_CONFLICT = "WebhookVersionConflict"
    BOILERPLATE_LOAD_FAILURE = "BoilerplateLoadFailure"
    SCAFFOLDER_FAILURE = "ScaffolderFailure"


class WebhookScaffoldError(RuntimeError):
    """Base class; subclasses pin `kind`."""

    kind: ErrorKind


class InvalidOptionError(WebhookScaffoldError):
    kind = ErrorKind.INVALID_OPTION


class InvalidResourceError(WebhookScaffoldError):
    kind = ErrorKind.INVALID_RESOURCE


class NoWebhookTypeSelectedError(WebhookScaffoldError):
    kind = ErrorKind.NO_WEBHOOK_TYPE_SELECTED


class ResourceNotFoundError(WebhookScaffoldError):
    kind = ErrorKind.RESOURCE_NOT_FOUND


class WebhookAlreadyExistsError(WebhookScaffoldError):
    kind = ErrorKind.WEBHOOK_ALREADY_EXISTS


class WebhookVersionConflictError(WebhookScaffoldError):
    kind = ErrorKind.WEBHOOK_VERSION_CONFLICT


class BoilerplateLoadError(WebhookScaffoldError):
    kind = ErrorKind.BOILERPLATE_LOAD_FAILURE


class ScaffolderError(WebhookScaffoldError):
    kind = ErrorKind.SCAFFOLDER_FAILURE
