"""Error boundary handling for CLI commands.

This module provides a decorator to catch exceptions at CLI entry points.
Well-known input errors are reported as a single clean line. Anything else is
an unexpected build failure and is reported with its message and full stack
trace. Either way the process exits with status 1.
"""

import functools
import traceback
from collections.abc import Callable
from typing import Any, TypeVar

import click

from registry_build.errors import RegistryDescriptorError
from registry_build.output import user_output

T = TypeVar("T", bound=Callable[..., Any])


def _debug_enabled() -> bool:
    ctx = click.get_current_context(silent=True)
    if ctx is None:
        return False
    return bool(ctx.find_root().params.get("debug", False))


def cli_error_boundary(func: T) -> T:
    """Decorator that turns exceptions into an error report and exit status 1.

    Catches:
        - RegistryDescriptorError: unreadable or malformed registry descriptor
        - FileNotFoundError: Missing files/directories
        - ValueError: Invalid input or configuration
        - PermissionError: Permission denied errors

    These are printed without a stack trace unless --debug is active. Any
    other Exception is printed as a build failure followed by its stack trace.
    KeyboardInterrupt exits with status 130. SystemExit is not intercepted.

    Example:
        @click.command()
        @cli_error_boundary
        def my_command():
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except KeyboardInterrupt:
            user_output("\n✗ Interrupted by user")
            raise SystemExit(130) from None
        except RegistryDescriptorError as e:
            _report_known(f"❌ {e}")
            raise SystemExit(1) from None
        except (FileNotFoundError, PermissionError, ValueError) as e:
            _report_known(f"Error: {e}")
            raise SystemExit(1) from None
        except (click.ClickException, click.exceptions.Exit, click.Abort):
            raise
        except Exception as e:
            user_output(click.style(f"❌ Build failed: {e}", fg="red"))
            user_output(traceback.format_exc())
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]


def _report_known(message: str) -> None:
    user_output(click.style(message, fg="red"))
    if _debug_enabled():
        user_output(traceback.format_exc())
