"""Run a scaffolding command: validate, acquire the scaffolder, scaffold once, post-scaffold."""

from enum import Enum
import logging
from typing import Protocol

from webhook_scaffold.errors import ScaffolderError, WebhookScaffoldError

logger = logging.getLogger(__name__)


class RunState(Enum):
    """Linear lifecycle of one invocation. FAILED is terminal and reachable from any step."""

    START = "Start"
    OPTIONS_BOUND = "OptionsBound"
    RESOURCE_BUILT = "ResourceBuilt"
    VALIDATED = "Validated"
    SCAFFOLDER_ACQUIRED = "ScaffolderAcquired"
    DONE = "Done"
    FAILED = "Failed"


class Scaffolder(Protocol):
    def scaffold(self) -> None:
        ...


class RunOptions(Protocol):
    """What `run` needs from a subcommand."""

    state: RunState

    def validate(self) -> None:
        ...

    def get_scaffolder(self) -> Scaffolder | None:
        ...

    def post_scaffold(self) -> None:
        ...


def _advance(options: RunOptions, state: RunState) -> None:
    logger.debug("%s -> %s", options.state.value, state.value)
    options.state = state


def run(options: RunOptions) -> None:
    """Drive options from a built resource to DONE.

    Every error sets the state to FAILED and then propagates. Anything the
    scaffolder raises outside the error taxonomy is wrapped in ScaffolderError;
    other exceptions propagate unchanged.
    """
    try:
        options.validate()
        _advance(options, RunState.VALIDATED)

        scaffolder = options.get_scaffolder()
        _advance(options, RunState.SCAFFOLDER_ACQUIRED)

        if scaffolder is not None:
            try:
                scaffolder.scaffold()
            except WebhookScaffoldError:
                raise
            except Exception as e:
                raise ScaffolderError(f"scaffolding failed: {e}") from e

        options.post_scaffold()
        _advance(options, RunState.DONE)
    except WebhookScaffoldError as e:
        logger.info("run failed in state %s: %s", options.state.value, e.kind.value)
        _advance(options, RunState.FAILED)
        raise
    except Exception:
        logger.debug("run aborted in state %s", options.state.value, exc_info=True)
        _advance(options, RunState.FAILED)
        raise
