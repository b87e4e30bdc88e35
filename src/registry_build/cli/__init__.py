"""Static CLI definition for registry-build."""

import logging
import os
from pathlib import Path

import click

from registry_build.commands.build_all import all_command
from registry_build.commands.bundles import bundles_command
from registry_build.commands.flat import flat_command
from registry_build.commands.transform_deps import transform_deps_command
from registry_build.context import create_context
from registry_build.version import __version__

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])

DEBUG_ENV_VAR = "REGISTRY_BUILD_DEBUG"


def _configure_logging(debug: bool) -> None:
    if debug or os.getenv(DEBUG_ENV_VAR):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


@click.group(name="registry-build", context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__)
@click.option(
    "--project-root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Directory holding registry.json (default: current directory)",
)
@click.option("--quiet", "-q", is_flag=True, help="Only show warnings and errors")
@click.option("--debug", is_flag=True, help="Enable debug logging and full stack traces")
@click.pass_context
def cli(ctx: click.Context, project_root: Path | None, quiet: bool, debug: bool) -> None:
    """Build static shadcn registry files."""
    _configure_logging(debug)

    # Tests inject a pre-built BuildContext via obj=
    if ctx.obj is None:
        root = (project_root or Path.cwd()).resolve()
        try:
            ctx.obj = create_context(root, quiet=quiet, debug=debug)
        except (OSError, ValueError) as e:
            raise click.ClickException(str(e)) from e


cli.add_command(all_command)
cli.add_command(bundles_command)
cli.add_command(flat_command)
cli.add_command(transform_deps_command)


def main() -> None:
    """Entry point for the registry-build script."""
    cli()


if __name__ == "__main__":
    main()
