"""Validation engine: an ordered, short-circuiting chain of registered checks."""

import logging

from webhook_scaffold.validation import checks  # noqa: F401  (registers the checks)
from webhook_scaffold.validation.context import ValidationContext
from webhook_scaffold.validation.registry import CHECKS, CheckDef, Step, ordered_checks, register

logger = logging.getLogger(__name__)


def validate(ctx: ValidationContext) -> None:
    """Run every registered check in step order; the first failure propagates and stops the chain."""
    for name, check in ordered_checks():
        logger.debug("running check %s (step %s)", name, check.step.name)
        check.handler(ctx)


__all__ = ["CHECKS", "CheckDef", "Step", "ValidationContext", "ordered_checks", "register", "validate"]
