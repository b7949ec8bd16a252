"""Observable Form Core - domain-agnostic building blocks.

Usage:
    from observable_form.core import (
        # Errors
        ObservableFormError,
        FormConfigurationError,
        # Events
        ChangeSignal,
        Subscription,
        # Factory
        PluginFactory,
        # Results (from abstract_validation_base)
        ValidationError,
        ValidationResult,
    )
"""

from __future__ import annotations

from abstract_validation_base import ValidationError, ValidationResult

from observable_form.core.errors import (
    PACKAGE_NAME,
    FormConfigurationError,
    ObservableFormError,
)
from observable_form.core.events import ChangeSignal, Subscription
from observable_form.core.factory import PluginFactory

__all__ = [
    # Errors
    "PACKAGE_NAME",
    "ObservableFormError",
    "FormConfigurationError",
    # Events
    "ChangeSignal",
    "Subscription",
    # Factory
    "PluginFactory",
    # Results (from abstract_validation_base)
    "ValidationError",
    "ValidationResult",
]
