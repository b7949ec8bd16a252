"""Validator kind and notification policy enumerations."""

from __future__ import annotations

from enum import Enum


class ValidatorKind(str, Enum):
    """Kinds of the built-in validators.

    Members compare equal to their string values, so ``errors["email"]``
    and ``errors[ValidatorKind.EMAIL]`` address the same entry.
    """

    REQUIRED = "required"
    EMAIL = "email"
    MIN_LENGTH = "min_length"
    MAX_LENGTH = "max_length"
    PATTERN = "pattern"
    ONE_OF = "one_of"
    INTEGER = "integer"
    NUMBER = "number"
    URL = "url"


class NotifyPolicy(str, Enum):
    """When a control notifies its subscribers after a value write."""

    ALWAYS = "always"
    """Every assignment notifies, even if nothing observable changed."""

    ON_CHANGE = "on_change"
    """Only notify when the value or the ErrorState differ from before."""


BUILTIN_KINDS: list[str] = [k.value for k in ValidatorKind]


def kind_key(kind: str | Enum) -> str:
    """Normalize a validator kind to the plain string used as a map key.

    Enum members hash by name rather than value, so they are unwrapped to
    their value before being used as dict keys.
    """
    if isinstance(kind, Enum):
        return str(kind.value)
    return str(kind)
