"""All command - full registry build pipeline."""

import click

from registry_build.context import BuildContext
from registry_build.error_boundary import cli_error_boundary
from registry_build.operations.bundles import build_bundles
from registry_build.operations.flat import build_flat_registry
from registry_build.operations.transform_deps import transform_output_tree


@click.command(name="all")
@click.pass_obj
@cli_error_boundary
def all_command(ctx: BuildContext) -> None:
    """Run flat, bundles and transform-deps in sequence.

    Stops at the first fatal error.
    """
    build_flat_registry(ctx)
    build_bundles(ctx, ctx.bundles)
    transform_output_tree(ctx)
