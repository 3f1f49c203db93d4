"""Check registry: step ordering and handler registration."""

from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum
from typing import Protocol

from webhook_scaffold.validation.context import ValidationContext


class Step(IntEnum):
    """Position of a check in the chain (lower runs first)."""

    OPTIONS = 0
    RESOURCE = 1
    WEBHOOK_TYPES = 2
    RESOURCE_EXISTS = 3
    NOT_DUPLICATED = 4
    WEBHOOK_VERSION = 5


class CheckHandler(Protocol):
    """Protocol for check functions. A check passes by returning and fails by raising."""

    def __call__(self, ctx: ValidationContext) -> None:
        ...


@dataclass
class CheckDef:
    """Registered check: handler and its step."""

    handler: Callable[[ValidationContext], None]
    step: Step


CHECKS: dict[str, CheckDef] = {}


def register(name: str, step: Step) -> Callable[[CheckHandler], CheckHandler]:
    """Decorator to register a check in CHECKS."""

    def decorator(fn: CheckHandler) -> CheckHandler:
        CHECKS[name] = CheckDef(handler=fn, step=step)
        return fn

    return decorator


def ordered_checks() -> list[tuple[str, CheckDef]]:
    """Registered checks sorted by step."""
    return sorted(CHECKS.items(), key=lambda item: item[1].step)
