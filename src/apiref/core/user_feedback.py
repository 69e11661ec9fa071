"""User-facing diagnostic output with mode awareness."""

from abc import ABC, abstractmethod

import click

from apiref.cli.output import user_output


class UserFeedback(ABC):
    """Provides user-facing diagnostic output that's mode-aware.

    Core operations report progress through ctx.feedback instead of printing
    directly, so --quiet can silence them without threading a flag through
    every call.

    Mode behavior:
        Interactive (default):
            - info() → stderr
            - success() → stderr, green
            - warning() → stderr, yellow
            - error() → stderr, red

        Quiet (--quiet):
            - info() and success() → suppressed
            - warning() and error() → still shown
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Show informational message (suppressed in quiet mode)."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Show success message (suppressed in quiet mode)."""

    @abstractmethod
    def warning(self, message: str) -> None:
        """Show warning message (always shown)."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Show error message (always shown)."""


class InteractiveFeedback(UserFeedback):
    """Feedback shown in interactive mode (all messages)."""

    def info(self, message: str) -> None:
        user_output(message)

    def success(self, message: str) -> None:
        user_output(click.style(message, fg="green"))

    def warning(self, message: str) -> None:
        user_output(click.style("Warning: ", fg="yellow") + message)

    def error(self, message: str) -> None:
        user_output(click.style("Error: ", fg="red") + message)


class SuppressedFeedback(InteractiveFeedback):
    """Feedback for --quiet: only warnings and errors are shown."""

    def info(self, message: str) -> None:
        pass

    def success(self, message: str) -> None:
        pass
