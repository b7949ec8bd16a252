"""Form control: a value holder with derived validation state.

Assigning ``control.value`` is the only mutation. It runs every attached
validator against the new value, stores the value together with the new
ErrorState and then notifies subscribers. All of this completes before the
assignment returns, so ``errors`` never describes an older value.

Example:
    >>> from observable_form import FormControl
    >>> from observable_form.validation import email, required
    >>> control = FormControl("", validators=[required, email])
    >>> control.is_valid, control.errors["email"]
    (False, True)
    >>> control.value = "test@gmail.com"
    >>> control.is_valid, control.errors["email"]
    (True, False)
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from abstract_validation_base import ValidationResult

from observable_form.core.errors import FormConfigurationError
from observable_form.core.events import ChangeSignal, Handler, Subscription
from observable_form.models.enums import NotifyPolicy
from observable_form.models.errors import ErrorState
from observable_form.validation.base import Validator
from observable_form.validation.factory import ValidatorSpec, resolve_validators

logger = logging.getLogger(__name__)

V = TypeVar("V")

_UNSET: Any = object()


@dataclass(frozen=True)
class ControlChanged(Generic[V]):
    """Event emitted by a control after a value write has been validated."""

    control: FormControl[V]
    previous_value: V
    value: V
    previous_errors: ErrorState
    errors: ErrorState

    @property
    def validity_changed(self) -> bool:
        """True if the write flipped the control between valid and invalid."""
        return self.previous_errors.is_valid != self.errors.is_valid


def _values_equal(a: Any, b: Any) -> bool:
    if a is b:
        return True
    if type(a) is not type(b):
        return False
    try:
        return bool(a == b)
    except (TypeError, ValueError):
        return False


class FormControl(Generic[V]):
    """A value plus an ordered, fixed set of validators.

    Args:
        value: Initial value. Validated immediately.
        validators: Validators or registered kind names, in evaluation order.
            Each kind may appear only once.
        name: Optional name used in log lines and validation reports. A Form
            names unnamed members after their member key.
        notify: NotifyPolicy.ALWAYS (default) notifies on every write;
            NotifyPolicy.ON_CHANGE skips writes that change neither the value
            nor the error state.

    Raises:
        FormConfigurationError: On duplicate validator kinds or unknown
            validator names.

    Not thread-safe: concurrent writers must synchronize externally.
    """

    def __init__(
        self,
        value: V,
        validators: Iterable[ValidatorSpec] = (),
        *,
        name: str | None = None,
        notify: NotifyPolicy | str = NotifyPolicy.ALWAYS,
    ) -> None:
        resolved = resolve_validators(validators)
        duplicates = [kind for kind, count in Counter(v.kind for v in resolved).items() if count > 1]
        if duplicates:
            raise FormConfigurationError.duplicate_kinds(duplicates, name)

        self._name = name
        self._validators: tuple[Validator[V], ...] = tuple(resolved)
        self._notify = NotifyPolicy(notify)
        self._changed: ChangeSignal[ControlChanged[V]] = ChangeSignal(name or "control")
        self._initial_value = value
        self._value = value
        self._errors = self._run_validators(value)

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def name(self) -> str | None:
        """Name of this control, if any."""
        return self._name

    @property
    def value(self) -> V:
        """Current value."""
        return self._value

    @value.setter
    def value(self, value: V) -> None:
        self._set_value(value)

    @property
    def initial_value(self) -> V:
        """Value the control was constructed with."""
        return self._initial_value

    @property
    def validators(self) -> tuple[Validator[V], ...]:
        """Attached validators, in evaluation order."""
        return self._validators

    @property
    def errors(self) -> ErrorState:
        """Error state for the current value."""
        return self._errors

    @property
    def is_valid(self) -> bool:
        """True when no attached validator rejects the current value."""
        return self._errors.is_valid

    @property
    def notify_policy(self) -> NotifyPolicy:
        return self._notify

    # =========================================================================
    # Mutation
    # =========================================================================

    def revalidate(self) -> ErrorState:
        """Re-run validation on the current value and notify subscribers.

        Returns:
            The new error state.
        """
        self._set_value(self._value)
        return self._errors

    def reset(self, value: V = _UNSET) -> None:
        """Restore the initial value, or assign *value* if given."""
        self._set_value(self._initial_value if value is _UNSET else value)

    def _set_value(self, value: V) -> None:
        previous_value, previous_errors = self._value, self._errors
        errors = self._run_validators(value)
        self._value, self._errors = value, errors

        if (
            self._notify is NotifyPolicy.ON_CHANGE
            and self._errors == previous_errors
            and _values_equal(previous_value, value)
        ):
            return

        self._changed.emit(
            ControlChanged(
                control=self,
                previous_value=previous_value,
                value=value,
                previous_errors=previous_errors,
                errors=self._errors,
            )
        )

    def _run_validators(self, value: V) -> ErrorState:
        # Every validator runs; a failure never short-circuits the rest.
        failures = {v.kind: not v.evaluate(value) for v in self._validators}
        errors = ErrorState(failures=failures)
        logger.debug(
            "Validated %s: %s",
            self._name or "control",
            ", ".join(errors.failing_kinds) or "valid",
        )
        return errors

    # =========================================================================
    # Observation
    # =========================================================================

    def subscribe(self, callback: Handler[ControlChanged[V]]) -> Subscription[ControlChanged[V]]:
        """Call *callback* after every validated value write.

        Returns:
            Subscription handle; cancel() detaches the callback.
        """
        return self._changed.subscribe(callback)

    def unsubscribe(self, callback: Handler[ControlChanged[V]]) -> bool:
        """Detach *callback*. Returns True if it was subscribed."""
        return self._changed.unsubscribe(callback)

    @property
    def subscriber_count(self) -> int:
        return self._changed.subscriber_count

    # =========================================================================
    # Reporting
    # =========================================================================

    def validation_result(self) -> ValidationResult:
        """Report the current failures as a ValidationResult.

        Each failing validator contributes one error carrying the control
        name, the validator message and the current value.
        """
        result = ValidationResult(is_valid=True)
        field = self._name or "value"
        for validator in self._validators:
            if self._errors[validator.kind]:
                result.add_error(
                    field,
                    validator.message,
                    None if self._value is None else str(self._value),
                )
        return result

    def _bind_name(self, name: str) -> None:
        if self._name is None:
            self._name = name
            self._changed.source_name = name

    def __repr__(self) -> str:
        label = f" {self._name!r}" if self._name else ""
        return f"<FormControl{label} value={self._value!r} errors={self._errors!r}>"
