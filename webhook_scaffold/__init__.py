"""Validation and scaffold orchestration for `create webhook` in generated operator projects."""

__version__ = "0.1.0"
