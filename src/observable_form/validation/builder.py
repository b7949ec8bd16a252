"""Fluent builder for a control's validator set.

Adding a validator whose kind is already present replaces the earlier one
in place, so a set assembled incrementally never carries duplicate kinds.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Generic, Self, TypeVar

from observable_form.models.enums import kind_key
from observable_form.validation.base import Validator
from observable_form.validation.factory import ValidatorFactory

V = TypeVar("V")


class ValidatorSetBuilder(Generic[V]):
    """Builder for an ordered, kind-unique validator list.

    Example:
        >>> validators = (
        ...     ValidatorSetBuilder()
        ...     .add(required)
        ...     .add_named("max_length", n=80)
        ...     .add(email)
        ...     .build()
        ... )
    """

    def __init__(self) -> None:
        self._validators: dict[str, Validator[V]] = {}

    def add(self, validator: Validator[V]) -> Self:
        """Add a validator, replacing any earlier one with the same kind."""
        self._validators[validator.kind] = validator
        return self

    def add_named(self, kind: str, **kwargs: Any) -> Self:
        """Add a registered validator by kind name."""
        return self.add(ValidatorFactory.create(kind, **kwargs))

    def remove(self, kind: str | Enum) -> Self:
        """Drop a validator by kind, if present."""
        self._validators.pop(kind_key(kind), None)
        return self

    def build(self) -> list[Validator[V]]:
        """Return the validators in the order their kinds were first added."""
        return list(self._validators.values())

    def reset(self) -> Self:
        """Clear all validators."""
        self._validators.clear()
        return self

    def __len__(self) -> int:
        return len(self._validators)
