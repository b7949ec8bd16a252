"""Validator base classes.

A validator is a pure predicate over a value plus a stable kind tag. The
kind addresses the validator's result in a control's ErrorState.

Validators also implement the abstract_validation_base BaseValidator
contract (``name`` and ``validate()``), so they can report into a
ValidationResult like any other validator.
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from collections.abc import Callable
from enum import Enum
from typing import Any, Generic, TypeVar

from abstract_validation_base import BaseValidator, ValidationResult

from observable_form.models.enums import kind_key

logger = logging.getLogger(__name__)

V = TypeVar("V")

Predicate = Callable[[V], bool]


class Validator(BaseValidator[V], Generic[V]):
    """Abstract base class for field validators.

    Subclasses implement ``kind`` and ``_evaluate_impl``. ``evaluate`` is
    total: a predicate that raises for an unexpected value is logged and
    counted as rejecting that value.

    Example:
        class EvenValidator(Validator[int]):
            @property
            def kind(self) -> str:
                return "even"

            def _evaluate_impl(self, value: int) -> bool:
                return value % 2 == 0
    """

    @property
    @abstractmethod
    def kind(self) -> str:
        """Stable identifier of this validator."""
        ...

    @property
    def message(self) -> str:
        """Failure message used in validation reports."""
        return f"Failed {self.kind} validation"

    @property
    def name(self) -> str:
        """Name of this validator for error reporting (same as kind)."""
        return self.kind

    @abstractmethod
    def _evaluate_impl(self, value: V) -> bool:
        """Internal predicate; True means the value is acceptable."""
        ...

    def evaluate(self, value: V) -> bool:
        """Check a value.

        Args:
            value: Value to check.

        Returns:
            True if the value is acceptable, False if this validator rejects it.
        """
        try:
            return bool(self._evaluate_impl(value))
        except Exception as e:
            logger.warning(
                "Validator %s raised on %r, treating as failure - %s",
                self.kind,
                value,
                str(e),
            )
            return False

    def validate(self, item: V, field: str | None = None) -> ValidationResult:
        """Validate an item into a ValidationResult.

        Args:
            item: Value to validate.
            field: Field name recorded on the error (defaults to the kind).

        Returns:
            ValidationResult with one error if the value is rejected.
        """
        result = ValidationResult(is_valid=True)
        if not self.evaluate(item):
            result.add_error(
                field or self.kind,
                self.message,
                None if item is None else str(item),
            )
        return result

    def __repr__(self) -> str:
        return f"<{type(self).__name__} kind={self.kind!r}>"


class PredicateValidator(Validator[V]):
    """Validator built from a kind and a plain predicate function.

    Example:
        >>> positive = PredicateValidator("positive", lambda n: n > 0)
        >>> positive.evaluate(3), positive.evaluate(-1)
        (True, False)
    """

    def __init__(
        self,
        kind: str | Enum,
        predicate: Predicate[V],
        message: str | None = None,
    ) -> None:
        self._kind = kind_key(kind)
        self._predicate = predicate
        self._message = message

    @property
    def kind(self) -> str:
        return self._kind

    @property
    def message(self) -> str:
        return self._message or super().message

    @property
    def predicate(self) -> Predicate[V]:
        return self._predicate

    def _evaluate_impl(self, value: V) -> bool:
        return self._predicate(value)


def validator(
    kind: str | Enum, message: str | None = None
) -> Callable[[Predicate[Any]], PredicateValidator[Any]]:
    """Decorator turning a predicate function into a validator.

    Example:
        @validator("lowercase", message="Must be lowercase")
        def lowercase(value: str) -> bool:
            return value == value.lower()
    """

    def wrap(func: Predicate[Any]) -> PredicateValidator[Any]:
        return PredicateValidator(kind, func, message or (func.__doc__ or "").strip() or None)

    return wrap
