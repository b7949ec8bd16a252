"""Error classes with package identification.

Validator rejections are ordinary state on a control's ErrorState and are
never raised. The classes here cover configuration mistakes only, which are
rejected at construction time.
"""

from __future__ import annotations

from typing import Any

# Package identifier for error context
PACKAGE_NAME = "observable_form"


class ObservableFormError(Exception):
    """Base exception for observable_form with package identification.

    Args:
        message: Human-readable description of the problem.
        context: Additional context dict merged into the error context.
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        self.message = message
        self.context = {"package": PACKAGE_NAME, **(context or {})}
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, context={self.context})"


class FormConfigurationError(ObservableFormError, ValueError):
    """Raised when a control, form or validator is configured incorrectly.

    Examples are duplicate validator kinds on one control, unknown validator
    names, or form members that are not controls. Subclasses ValueError so
    callers that only know about built-in exceptions can still catch it.
    """

    @classmethod
    def duplicate_kinds(cls, kinds: list[str], owner: str | None = None) -> FormConfigurationError:
        """Build the error for a validator set that repeats a kind.

        Args:
            kinds: The kinds that appear more than once.
            owner: Name of the control being configured (optional).

        Returns:
            FormConfigurationError describing the duplicates.
        """
        where = f" on control {owner!r}" if owner else ""
        return cls(
            f"Duplicate validator kinds{where}: {', '.join(kinds)}",
            {"kinds": kinds, "control": owner},
        )
