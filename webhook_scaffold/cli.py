"""
webhook-scaffold CLI: add defaulting, validating and conversion webhooks to an existing API.
Run from the project root (the directory holding PROJECT and hack/boilerplate.go.txt).
"""

import argparse
import logging
from pathlib import Path
import sys
from typing import NoReturn

from webhook_scaffold.config import load_project_config
from webhook_scaffold.errors import WebhookScaffoldError
from webhook_scaffold.options import DEFAULT_WEBHOOK_VERSION, CommandOptions
from webhook_scaffold.webhook import DESCRIPTION, EXAMPLES, CreateWebhookSubcommand

COMMAND_NAME = "webhook-scaffold"


def _project_root() -> Path:
    return Path.cwd()


def _fail(message: str) -> NoReturn:
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)


def _bind_webhook_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--group", default="", help="resource Group")
    parser.add_argument("--version", default="", help="resource Version")
    parser.add_argument("--kind", default="", help="resource Kind")
    parser.add_argument("--plural", default="", help="resource irregular plural form")
    parser.add_argument(
        "--webhook-version",
        default=DEFAULT_WEBHOOK_VERSION,
        help="version of {Mutating,Validating}WebhookConfigurations to scaffold. Options: [v1, v1beta1]",
    )
    parser.add_argument("--defaulting", action="store_true", help="if set, scaffold the defaulting webhook")
    parser.add_argument(
        "--programmatic-validation",
        action="store_true",
        help="if set, scaffold the validating webhook",
    )
    parser.add_argument("--conversion", action="store_true", help="if set, scaffold the conversion webhook")
    parser.add_argument(
        "--force",
        action="store_true",
        help="attempt to create resource even if it already exists",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=COMMAND_NAME,
        description="Scaffold webhooks for API resources of a generated operator project.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)
    create_p = sub.add_parser("create", help="Scaffold a new artifact")
    create_sub = create_p.add_subparsers(dest="artifact", required=True)
    webhook_p = create_sub.add_parser(
        "webhook",
        help="Scaffold a webhook for an API resource",
        description=DESCRIPTION,
        epilog="Examples:\n" + EXAMPLES.format(command=COMMAND_NAME),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    _bind_webhook_flags(webhook_p)
    return parser


def _cmd_create_webhook(args: argparse.Namespace) -> None:
    root = _project_root()
    try:
        config = load_project_config(root)
    except SystemExit as e:
        _fail(str(e.code))
    subcommand = CreateWebhookSubcommand(config, command_name=COMMAND_NAME, project_root=root)
    subcommand.bind_options(CommandOptions.from_args(args, config))
    try:
        subcommand.run()
    except WebhookScaffoldError as e:
        _fail(str(e))
    print(f"Webhook scaffolded for {subcommand.built_resource().gvk}")


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "create" and args.artifact == "webhook":
        _cmd_create_webhook(args)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
