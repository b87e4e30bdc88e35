"""Bundles command - per-backend bundle registries."""

import click

from registry_build.context import BuildContext
from registry_build.error_boundary import cli_error_boundary
from registry_build.operations.bundles import build_bundles


@click.command(name="bundles")
@click.pass_obj
@cli_error_boundary
def bundles_command(ctx: BuildContext) -> None:
    """Build backend bundle registries.

    Writes public/r/<backend>/<bundle>.json and public/r/<backend>/registry.json
    for every backend in the bundle table (localstorage, convex, supabase,
    postgres, mysql).
    """
    build_bundles(ctx, ctx.bundles)
