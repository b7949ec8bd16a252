"""Validator implementations.

This module provides the validator base classes, the built-in validators
and the registry used to resolve validators by kind name.
"""

from observable_form.validation.base import PredicateValidator, Validator, validator
from observable_form.validation.builder import ValidatorSetBuilder
from observable_form.validation.factory import (
    ValidatorFactory,
    ValidatorSpec,
    resolve_validators,
)
from observable_form.validation.validators import (
    email,
    integer,
    is_empty,
    max_length,
    min_length,
    number,
    one_of,
    pattern,
    required,
    url,
)

__all__ = [
    "Validator",
    "PredicateValidator",
    "validator",
    "ValidatorSetBuilder",
    "ValidatorFactory",
    "ValidatorSpec",
    "resolve_validators",
    "email",
    "integer",
    "is_empty",
    "max_length",
    "min_length",
    "number",
    "one_of",
    "pattern",
    "required",
    "url",
]
