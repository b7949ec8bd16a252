"""Built-in validators.

Stateless validators are shared module-level instances::

    from observable_form.validation import email, required

    control = FormControl("", validators=[required, email])

Parameterized validators are factory functions returning a new validator::

    control = FormControl("", validators=[required, max_length(200)])

Every built-in is total: values of an unexpected type are rejected, never
raised on.
"""

from __future__ import annotations

import math
import re
from collections.abc import Sized
from typing import Any

from observable_form.models.enums import ValidatorKind
from observable_form.validation.base import PredicateValidator

# ---------------------------------------------------------------------------
# Presence
# ---------------------------------------------------------------------------


def is_empty(value: Any) -> bool:
    """Whether a value is the "empty" representation for its type.

    None, blank strings and empty collections are empty. Numbers and
    booleans are always present, including 0 and False.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, Sized):
        return len(value) == 0
    return False


required: PredicateValidator[Any] = PredicateValidator(
    ValidatorKind.REQUIRED,
    lambda value: not is_empty(value),
    "This field is required",
)


# ---------------------------------------------------------------------------
# Format
# ---------------------------------------------------------------------------

# Basic email pattern - checks structure, not deliverability
_EMAIL_RE = re.compile(r"^[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}$")

# Basic URL pattern - checks scheme + host structure
_URL_RE = re.compile(r"^https?://[^\s/$.?#].\S*$", re.IGNORECASE)


def _matches(regex: re.Pattern[str], value: Any) -> bool:
    return isinstance(value, str) and regex.match(value) is not None


email: PredicateValidator[Any] = PredicateValidator(
    ValidatorKind.EMAIL,
    lambda value: _matches(_EMAIL_RE, value),
    "Must be a valid email address",
)

url: PredicateValidator[Any] = PredicateValidator(
    ValidatorKind.URL,
    lambda value: _matches(_URL_RE, value),
    "Must be a valid URL",
)


def pattern(
    regex: str,
    message: str | None = None,
    kind: str = ValidatorKind.PATTERN.value,
) -> PredicateValidator[Any]:
    """Value must be a string matching *regex* from its start.

    Pass a distinct ``kind`` to attach several patterns to one control.
    """
    compiled = re.compile(regex)
    return PredicateValidator(
        kind,
        lambda value: _matches(compiled, value),
        message or f"Must match pattern: {regex}",
    )


# ---------------------------------------------------------------------------
# Length
# ---------------------------------------------------------------------------


def _length(value: Any) -> int | None:
    if value is None:
        return 0
    if isinstance(value, Sized):
        return len(value)
    return None


def min_length(n: int) -> PredicateValidator[Any]:
    """Value must have at least *n* items or characters."""

    def check(value: Any) -> bool:
        length = _length(value)
        return length is not None and length >= n

    return PredicateValidator(ValidatorKind.MIN_LENGTH, check, f"Must be at least {n} characters")


def max_length(n: int) -> PredicateValidator[Any]:
    """Value must have at most *n* items or characters."""

    def check(value: Any) -> bool:
        length = _length(value)
        return length is not None and length <= n

    return PredicateValidator(ValidatorKind.MAX_LENGTH, check, f"Must be at most {n} characters")


# ---------------------------------------------------------------------------
# Choice
# ---------------------------------------------------------------------------


def one_of(*choices: Any) -> PredicateValidator[Any]:
    """Value must be one of the given choices."""
    allowed = tuple(choices)
    options = ", ".join(str(c) for c in allowed)

    def check(value: Any) -> bool:
        return any(value == choice for choice in allowed)

    return PredicateValidator(ValidatorKind.ONE_OF, check, f"Must be one of: {options}")


# ---------------------------------------------------------------------------
# Numeric
# ---------------------------------------------------------------------------


def _is_integer(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, str):
        try:
            int(value)
        except ValueError:
            return False
        return True
    return False


def _is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return not (isinstance(value, float) and math.isnan(value))
    if isinstance(value, str):
        try:
            parsed = float(value)
        except ValueError:
            return False
        return not math.isnan(parsed)
    return False


integer: PredicateValidator[Any] = PredicateValidator(
    ValidatorKind.INTEGER, _is_integer, "Must be a whole number"
)

number: PredicateValidator[Any] = PredicateValidator(
    ValidatorKind.NUMBER, _is_number, "Must be a number"
)
