"""observable-form: reactive field validation for Python.

This package provides:
- FormControl: a value holder that revalidates on every write
- ErrorState: per-validator pass/fail snapshot, addressable by kind
- Form: a fixed set of named controls with aggregate validity
- Composable validators and a registry for resolving them by name
- Explicit subscribe/unsubscribe change notification

Quick Start:
    >>> from observable_form import Form, FormControl
    >>> from observable_form.validation import email, required
    >>> control = FormControl("", validators=[required, email])
    >>> control.is_valid, control.errors["email"]
    (False, True)
    >>> control.value = "test@gmail.com"
    >>> control.is_valid
    True

    # Forms aggregate validity and re-publish member changes
    >>> form = Form(name=FormControl("", ["required"]), email=control)
    >>> subscription = form.subscribe(lambda event: print(event.field))
    >>> form.name.value = "Ryan"
    name
    >>> form.is_valid
    True
"""

from __future__ import annotations  # noqa: I001

# Import order is intentional to avoid circular imports - do not auto-fix
from observable_form.core import (
    PACKAGE_NAME,
    ChangeSignal,
    FormConfigurationError,
    ObservableFormError,
    Subscription,
    ValidationError,
    ValidationResult,
)
from observable_form.models import ErrorState, NotifyPolicy, ValidatorKind
from observable_form.validation import (
    PredicateValidator,
    Validator,
    ValidatorFactory,
    ValidatorSetBuilder,
    validator,
)
from observable_form.control import ControlChanged, FormControl
from observable_form.form import Form, FormChanged

__version__ = "0.1.0"

__all__ = [
    # Main API
    "FormControl",
    "Form",
    "ErrorState",
    # Events
    "ControlChanged",
    "FormChanged",
    "ChangeSignal",
    "Subscription",
    # Validators
    "Validator",
    "PredicateValidator",
    "validator",
    "ValidatorFactory",
    "ValidatorSetBuilder",
    "ValidatorKind",
    "NotifyPolicy",
    # Reporting (from abstract_validation_base)
    "ValidationError",
    "ValidationResult",
    # Errors
    "PACKAGE_NAME",
    "ObservableFormError",
    "FormConfigurationError",
]
