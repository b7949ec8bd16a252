"""Per-control error state.

An ErrorState is the snapshot produced by one validation pass: for each
attached validator kind, whether that validator currently rejects the
value. It is frozen, so a snapshot taken before a value change stays
accurate for the value it was computed from.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from observable_form.models.enums import kind_key


class ErrorState(BaseModel):
    """Mapping from validator kind to "currently failing".

    Lookups by an unknown kind return False, so ``errors["email"]`` is safe
    to read whether or not an email validator is attached.

    Example:
        >>> state = ErrorState(failures={"required": True, "email": True})
        >>> state["email"], state.is_valid
        (True, False)
        >>> ErrorState()["anything"]
        False
    """

    model_config = ConfigDict(frozen=True)

    failures: Mapping[str, bool] = Field(default_factory=dict, validate_default=True)

    @field_validator("failures", mode="before")
    @classmethod
    def _normalize_kinds(cls, value: Any) -> Any:
        if isinstance(value, Mapping):
            return {kind_key(k): bool(v) for k, v in value.items()}
        return value

    @field_validator("failures", mode="after")
    @classmethod
    def _freeze(cls, value: Mapping[str, bool]) -> Mapping[str, bool]:
        return MappingProxyType(dict(value))

    @field_serializer("failures")
    def _dump_failures(self, value: Mapping[str, bool]) -> dict[str, bool]:
        return dict(value)

    @property
    def is_valid(self) -> bool:
        """True when no attached validator rejects the value."""
        return not any(self.failures.values())

    @property
    def failing_kinds(self) -> tuple[str, ...]:
        """Kinds that currently fail, in validator order."""
        return tuple(kind for kind, failed in self.failures.items() if failed)

    def __getitem__(self, kind: str | Enum) -> bool:
        return self.failures.get(kind_key(kind), False)

    def __contains__(self, kind: object) -> bool:
        if not isinstance(kind, (str, Enum)):
            return False
        return kind_key(kind) in self.failures

    def __len__(self) -> int:
        return len(self.failures)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ErrorState):
            return NotImplemented
        return dict(self.failures) == dict(other.failures)

    def __hash__(self) -> int:
        return hash(tuple(self.failures.items()))

    def __repr__(self) -> str:
        return f"ErrorState({dict(self.failures)!r})"
