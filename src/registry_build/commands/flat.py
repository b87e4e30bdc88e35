"""Flat command - registry-index compatible item files."""

import click

from registry_build.context import BuildContext
from registry_build.error_boundary import cli_error_boundary
from registry_build.operations.flat import build_flat_registry


@click.command(name="flat")
@click.pass_obj
@cli_error_boundary
def flat_command(ctx: BuildContext) -> None:
    """Build the flat registry from registry.json.

    One item file per registry item without inline file content, source files
    copied to their served paths, and a consolidated registry.json.
    Missing item names and missing source files are reported and skipped.
    """
    build_flat_registry(ctx)
