"""Output utilities for CLI commands with clear intent."""

from typing import Any

import click


def user_output(message: Any = "", nl: bool = True) -> None:
    """Write a human-readable message to stderr.

    Progress and summary lines are for the operator only and never parsed,
    so they stay off stdout.
    """
    click.echo(message, nl=nl, err=True)
