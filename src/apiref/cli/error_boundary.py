"""Error boundary handling for CLI commands.

Well-known exceptions raised inside a command are turned into a clean
"Error: ..." message and exit code 1. The traceback is logged at DEBUG, so
`apiref --debug` still shows where the error came from.
"""

import functools
import logging
from collections.abc import Callable
from typing import Any, NoReturn, TypeVar

import click

from apiref.cli.output import machine_output, user_output
from apiref.core.errors import ApiRefError, DependencyInstallError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Callable[..., Any])


def _fail(e: BaseException) -> NoReturn:
    logger.debug("Command failed", exc_info=e)
    user_output(click.style("Error: ", fg="red") + str(e))
    raise SystemExit(1) from None


def cli_error_boundary(func: T) -> T:
    """Decorator that catches well-known exceptions and displays clean error messages.

    Apply it below the click decorators of a command:

        @click.command()
        @click.pass_obj
        @cli_error_boundary
        def my_command(ctx: ApiRefContext) -> None:
            ...

    Catches:
        - ApiRefError: validation, installation, and download failures
        - FileNotFoundError: Missing files/directories
        - ValueError: Invalid input or configuration
        - PermissionError: Permission denied errors

    The output of a failed installer process is echoed verbatim before the
    error message. All other exceptions bubble up with full stack traces.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except DependencyInstallError as e:
            if e.stdout:
                machine_output(e.stdout, nl=False)
            if e.stderr:
                user_output(e.stderr, nl=False)
            _fail(e)
        except ApiRefError as e:
            _fail(e)
        except FileNotFoundError as e:
            _fail(e)
        except ValueError as e:
            _fail(e)
        except PermissionError as e:
            _fail(e)

    return wrapper  # type: ignore[return-value]
