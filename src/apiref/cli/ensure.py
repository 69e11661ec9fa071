"""CLI invariant checks with styled output.

Each check prints a red "Error:" message and exits with code 1 when it
fails, so commands can state their preconditions in one line.
"""

from typing import TypeVar

import click

from apiref.cli.output import user_output

T = TypeVar("T")


class Ensure:
    """Helper class for asserting invariants with consistent error handling."""

    @staticmethod
    def invariant(condition: bool, error_message: str) -> None:
        """Ensure condition is true, otherwise output styled error and exit.

        Raises:
            SystemExit: If condition is false (with exit code 1)
        """
        if not condition:
            user_output(click.style("Error: ", fg="red") + error_message)
            raise SystemExit(1)

    @staticmethod
    def not_empty(values: list[T], error_message: str) -> list[T]:
        """Ensure values has at least one element, otherwise output styled error and exit.

        Returns:
            values unchanged

        Raises:
            SystemExit: If values is empty (with exit code 1)
        """
        if not values:
            user_output(click.style("Error: ", fg="red") + error_message)
            raise SystemExit(1)
        return values
