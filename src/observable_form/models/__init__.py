"""Value models: error snapshots and enumerations."""

from __future__ import annotations

from observable_form.models.enums import (
    BUILTIN_KINDS,
    NotifyPolicy,
    ValidatorKind,
    kind_key,
)
from observable_form.models.errors import ErrorState

__all__ = [
    # Enums and constants
    "BUILTIN_KINDS",
    "NotifyPolicy",
    "ValidatorKind",
    "kind_key",
    # Error state
    "ErrorState",
]
