"""`create webhook` subcommand: build the resource, validate it, hand off to the scaffolder."""

from collections.abc import Callable
import logging
from pathlib import Path

from webhook_scaffold import runner, validation
from webhook_scaffold.config import ProjectConfig
from webhook_scaffold.errors import BoilerplateLoadError
from webhook_scaffold.model.resource import Resource
from webhook_scaffold.options import CommandOptions
from webhook_scaffold.runner import RunState, Scaffolder
from webhook_scaffold.scaffolds.webhook import WebhookScaffolder

logger = logging.getLogger(__name__)

BOILERPLATE_PATH = Path("hack") / "boilerplate.go.txt"

DESCRIPTION = """Scaffold a webhook for an API resource. You can choose to scaffold defaulting,
validating and (or) conversion webhooks.
"""

EXAMPLES = """  # Create defaulting and validating webhooks for CRD of group ship, version v1beta1
  # and kind Frigate.
  {command} create webhook --group ship --version v1beta1 --kind Frigate --defaulting --programmatic-validation

  # Create conversion webhook for CRD of group ship, version v1beta1 and kind Frigate.
  {command} create webhook --group ship --version v1beta1 --kind Frigate --conversion
"""

ScaffolderFactory = Callable[[ProjectConfig, str, Resource, bool], Scaffolder]


class CreateWebhookSubcommand:
    """One `create webhook` invocation. Runs at most once."""

    def __init__(
        self,
        config: ProjectConfig,
        options: CommandOptions | None = None,
        command_name: str = "webhook-scaffold",
        project_root: Path | None = None,
        scaffolder_factory: ScaffolderFactory = WebhookScaffolder,
    ) -> None:
        self.config = config
        self.options: CommandOptions | None = None
        self.command_name = command_name
        self.project_root = project_root or Path.cwd()
        self.scaffolder_factory = scaffolder_factory
        self.resource: Resource | None = None
        self.state = RunState.START
        if options is not None:
            self.bind_options(options)

    def bind_options(self, options: CommandOptions) -> None:
        if self.state is not RunState.START:
            raise RuntimeError(f"options already bound (state: {self.state.value})")
        self.options = options
        self.state = RunState.OPTIONS_BOUND

    def run(self) -> None:
        if self.state is RunState.START:
            raise RuntimeError("options have not been bound; call bind_options()")
        if self.state is not RunState.OPTIONS_BOUND:
            raise RuntimeError(f"create webhook already ran (state: {self.state.value})")
        self.resource = self.bound_options().new_resource(self.config)
        self.state = RunState.RESOURCE_BUILT
        runner.run(self)

    def validate(self) -> None:
        validation.validate(
            validation.ValidationContext(
                config=self.config,
                options=self.bound_options(),
                resource=self.built_resource(),
                command_name=self.command_name,
            )
        )

    def get_scaffolder(self) -> Scaffolder:
        path = self.project_root / BOILERPLATE_PATH
        try:
            boilerplate = path.read_text(encoding="utf-8")
        except OSError as e:
            raise BoilerplateLoadError(f"unable to load boilerplate: {e}") from e
        logger.debug("loaded boilerplate from %s", path)
        return self.scaffolder_factory(self.config, boilerplate, self.built_resource(), self.bound_options().force)

    def post_scaffold(self) -> None:
        pass

    def bound_options(self) -> CommandOptions:
        if self.options is None:
            raise RuntimeError("options have not been bound; call bind_options()")
        return self.options

    def built_resource(self) -> Resource:
        if self.resource is None:
            raise RuntimeError("resource has not been built; call run()")
        return self.resource
