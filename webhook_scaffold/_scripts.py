"""Runnable scripts for common dev tasks. Use: uv run <script-name> (see pyproject.toml)."""

import subprocess
import sys


def _run(args: list[str]) -> None:
    """Run a command; exit with its code."""
    sys.exit(subprocess.run(args).returncode)


def lint() -> None:
    """Run ruff check on webhook_scaffold and tests."""
    _run([sys.executable, "-m", "ruff", "check", "webhook_scaffold", "tests"])


def type_check() -> None:
    """Run pyright on webhook_scaffold."""
    _run([sys.executable, "-m", "pyright", "webhook_scaffold"])


def test() -> None:
    """Run pytest."""
    _run([sys.executable, "-m", "pytest", "tests/", "-v"])


def test_cov() -> None:
    """Run pytest with coverage report."""
    _run(
        [
            sys.executable,
            "-m",
            "pytest",
            "tests/",
            "--cov=webhook_scaffold",
            "--cov-report=term-missing",
            "-v",
        ]
    )
