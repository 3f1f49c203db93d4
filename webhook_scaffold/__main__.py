"""Entry point for `python -m webhook_scaffold`."""

from webhook_scaffold.cli import main

main()
