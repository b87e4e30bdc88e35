"""User-facing progress output with quiet-mode awareness."""

from abc import ABC, abstractmethod

import click

from registry_build.output import user_output

SEPARATOR = "━" * 40


class UserFeedback(ABC):
    """Provides user-facing progress and diagnostic output.

    Builders call these methods instead of printing directly, so that the
    same operation can run verbosely, quietly, or against a recording fake
    in tests.

    Two modes:
    - Interactive: Show everything
    - Quiet: Suppress info and success, keep warnings and errors

    Usage:
        ctx.feedback.info("Processing 12 registry items...")
        ctx.feedback.warning("⚠️  Warning: Source file not found: registry/x.ts")
        ctx.feedback.success("✅ Flat registry built successfully!")
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Show informational message (suppressed in quiet mode)."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Show success message (suppressed in quiet mode)."""

    @abstractmethod
    def warning(self, message: str) -> None:
        """Show warning for a skipped unit (always shown)."""

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
        user_output(click.style(message, fg="yellow"))

    def error(self, message: str) -> None:
        user_output(click.style(message, fg="red"))


class SuppressedFeedback(UserFeedback):
    """Feedback for --quiet runs (only warnings and errors shown)."""

    def info(self, message: str) -> None:
        pass

    def success(self, message: str) -> None:
        pass

    def warning(self, message: str) -> None:
        user_output(click.style(message, fg="yellow"))

    def error(self, message: str) -> None:
        user_output(click.style(message, fg="red"))


class FakeFeedback(UserFeedback):
    """In-memory fake that records messages instead of printing them.

    This class has NO public setup methods. All state is captured during
    execution.
    """

    def __init__(self) -> None:
        self._messages: list[tuple[str, str]] = []

    @property
    def messages(self) -> list[tuple[str, str]]:
        """Recorded (level, message) pairs, in call order.

        This property is for test assertions only.
        """
        return self._messages

    @property
    def warnings(self) -> list[str]:
        return [message for level, message in self._messages if level == "warning"]

    @property
    def text(self) -> str:
        """All recorded messages joined by newlines."""
        return "\n".join(message for _, message in self._messages)

    def info(self, message: str) -> None:
        self._messages.append(("info", message))

    def success(self, message: str) -> None:
        self._messages.append(("success", message))

    def warning(self, message: str) -> None:
        self._messages.append(("warning", message))

    def error(self, message: str) -> None:
        self._messages.append(("error", message))
