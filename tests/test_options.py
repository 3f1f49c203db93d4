"""Tests for CommandOptions binding, validation and resource construction."""

import argparse

import pytest

from webhook_scaffold.config import ProjectConfig
from webhook_scaffold.model.resource import GVK, Webhooks
from webhook_scaffold.options import DEFAULT_WEBHOOK_VERSION, CommandOptions


def _options(**overrides: object) -> CommandOptions:
    fields: dict[str, object] = {"group": "ship", "version": "v1beta1", "kind": "Frigate", "domain": "my.domain"}
    fields.update(overrides)
    return CommandOptions(**fields)  # type: ignore[arg-type]


def test_defaults() -> None:
    opts = CommandOptions()
    assert opts.webhook_version == DEFAULT_WEBHOOK_VERSION == "v1"
    assert not (opts.do_defaulting or opts.do_validation or opts.do_conversion or opts.force)


def test_from_args_binds_domain_from_config() -> None:
    args = argparse.Namespace(
        group="ship",
        version="v1beta1",
        kind="Frigate",
        plural="",
        webhook_version="v1beta1",
        defaulting=True,
        programmatic_validation=False,
        conversion=True,
        force=True,
    )
    opts = CommandOptions.from_args(args, ProjectConfig(domain="my.domain"))
    assert opts == _options(webhook_version="v1beta1", do_defaulting=True, do_conversion=True, force=True)


def test_validate_accepts_valid() -> None:
    _options().validate()
    _options(group="").validate()
    _options(webhook_version="").validate()


@pytest.mark.parametrize(
    ("overrides", "message"),
    [
        ({"group": "--version"}, "group flag present but empty"),
        ({"version": "--kind"}, "version flag present but empty"),
        ({"kind": "--defaulting"}, "kind flag present but empty"),
        ({"version": ""}, "version cannot be empty"),
        ({"kind": ""}, "kind cannot be empty"),
        ({"webhook_version": "v2"}, "Webhook version must be one of"),
    ],
)
def test_validate_rejects(overrides: dict[str, str], message: str) -> None:
    with pytest.raises(ValueError, match=message):
        _options(**overrides).validate()


def test_new_resource_builds_gvk_path_and_webhooks() -> None:
    config = ProjectConfig(domain="my.domain", repo="github.com/example/crew")
    resource = _options(do_validation=True, plural="frigatez").new_resource(config)

    assert resource.gvk == GVK(group="ship", domain="my.domain", version="v1beta1", kind="Frigate")
    assert resource.plural == "frigatez"
    assert resource.path == "github.com/example/crew/api/v1beta1"
    assert resource.webhooks == Webhooks(webhook_version="v1", validation=True)


def test_new_resource_passes_degenerate_values_through() -> None:
    """Construction never validates; empty fields stay empty."""
    resource = CommandOptions().new_resource(ProjectConfig())
    assert resource.gvk == GVK()
    assert resource.plural == ""
    assert resource.webhooks == Webhooks(webhook_version="v1")
