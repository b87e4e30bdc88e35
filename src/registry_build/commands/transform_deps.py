"""Transform-deps command - post-build dependency URL rewrite."""

import click

from registry_build.context import BuildContext
from registry_build.error_boundary import cli_error_boundary
from registry_build.operations.transform_deps import transform_output_tree


@click.command(name="transform-deps")
@click.pass_obj
@cli_error_boundary
def transform_deps_command(ctx: BuildContext) -> None:
    """Rewrite registryDependencies in every output JSON file to full URLs.

    Idempotent: files already using URLs are left untouched. A file that
    cannot be read or parsed is reported and skipped without failing the run.
    """
    transform_output_tree(ctx)
