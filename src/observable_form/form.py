"""Forms: fixed, named collections of controls.

A Form subscribes to each member control when it is constructed and
re-publishes every member change as a FormChanged event, so an observer of
the form alone stays current. Aggregate validity is never stored; it is
recomputed from the members on every read.

Example:
    class ProfileForm(Form):
        def __init__(self) -> None:
            super().__init__(
                name=FormControl("", validators=[required]),
                email=FormControl("", validators=[required, email]),
            )

    form = ProfileForm()
    form.is_valid          # False
    form.email.value = "test@gmail.com"
    form.name.value = "Ryan"
    form.is_valid          # True
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from functools import partial
from types import MappingProxyType
from typing import Any

from abstract_validation_base import ValidationResult

from observable_form.control import ControlChanged, FormControl
from observable_form.core.errors import FormConfigurationError
from observable_form.core.events import ChangeSignal, Handler, Subscription
from observable_form.models.errors import ErrorState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FormChanged:
    """Event emitted by a form when one of its members changed."""

    form: Form
    field: str
    change: ControlChanged[Any]

    @property
    def control(self) -> FormControl[Any]:
        return self.change.control


class Form:
    """Aggregate of named controls.

    Args:
        members: Mapping of member name to control, in declaration order.
        **controls: Further members given as keyword arguments, appended
            after *members*.

    Raises:
        FormConfigurationError: If a name is repeated, empty, or clashes
            with a Form attribute, or if a member is not a FormControl.

    The member set is fixed for the life of the form.
    """

    def __init__(
        self,
        members: Mapping[str, FormControl[Any]] | None = None,
        /,
        **controls: FormControl[Any],
    ) -> None:
        collected: dict[str, FormControl[Any]] = {}
        for source in (members or {}, controls):
            for name, control in source.items():
                self._check_member(name, control, collected)
                collected[name] = control

        self._controls: Mapping[str, FormControl[Any]] = MappingProxyType(collected)
        self._changed: ChangeSignal[FormChanged] = ChangeSignal(type(self).__name__)
        self._member_subscriptions: list[Subscription[ControlChanged[Any]]] = []

        for name, control in collected.items():
            control._bind_name(name)
            self._member_subscriptions.append(
                control.subscribe(partial(self._on_member_changed, name))
            )

        logger.debug("%s bound %d control(s)", type(self).__name__, len(collected))

    def _check_member(
        self, name: Any, control: Any, collected: Mapping[str, FormControl[Any]]
    ) -> None:
        if not isinstance(name, str) or not name:
            raise FormConfigurationError(
                f"Form member names must be non-empty strings, got {name!r}",
                {"form": type(self).__name__},
            )
        if name in collected:
            raise FormConfigurationError(
                f"Duplicate form member: {name}",
                {"form": type(self).__name__, "member": name},
            )
        if name.startswith("_") or hasattr(type(self), name):
            raise FormConfigurationError(
                f"Form member {name!r} clashes with a {type(self).__name__} attribute",
                {"form": type(self).__name__, "member": name},
            )
        if not isinstance(control, FormControl):
            raise FormConfigurationError(
                f"Form member {name!r} must be a FormControl, got {type(control).__name__}",
                {"form": type(self).__name__, "member": name},
            )

    # =========================================================================
    # Member access
    # =========================================================================

    @property
    def controls(self) -> Mapping[str, FormControl[Any]]:
        """Read-only view of the members, in declaration order."""
        return self._controls

    def __getitem__(self, name: str) -> FormControl[Any]:
        return self._controls[name]

    def __getattr__(self, name: str) -> FormControl[Any]:
        # Only reached when normal lookup fails
        controls = self.__dict__.get("_controls")
        if controls is not None and name in controls:
            return controls[name]
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def __iter__(self) -> Iterator[str]:
        return iter(self._controls)

    def __len__(self) -> int:
        return len(self._controls)

    def __contains__(self, name: object) -> bool:
        return name in self._controls

    # =========================================================================
    # Aggregate state
    # =========================================================================

    @property
    def is_valid(self) -> bool:
        """True when every member control is valid. An empty form is valid."""
        return all(control.is_valid for control in self._controls.values())

    @property
    def errors(self) -> dict[str, ErrorState]:
        """Current error state of each member."""
        return {name: control.errors for name, control in self._controls.items()}

    @property
    def values(self) -> dict[str, Any]:
        """Current value of each member."""
        return {name: control.value for name, control in self._controls.items()}

    @property
    def invalid_fields(self) -> list[str]:
        """Names of members that are currently invalid, in declaration order."""
        return [name for name, control in self._controls.items() if not control.is_valid]

    def reset(self) -> None:
        """Restore every member to its initial value."""
        for control in self._controls.values():
            control.reset()

    def validation_result(self) -> ValidationResult:
        """Merged ValidationResult across all members."""
        result = ValidationResult(is_valid=True)
        for control in self._controls.values():
            result.merge(control.validation_result())
        return result

    # =========================================================================
    # Observation
    # =========================================================================

    def subscribe(self, callback: Handler[FormChanged]) -> Subscription[FormChanged]:
        """Call *callback* whenever any member control changes.

        Returns:
            Subscription handle; cancel() detaches the callback.
        """
        return self._changed.subscribe(callback)

    def unsubscribe(self, callback: Handler[FormChanged]) -> bool:
        """Detach *callback*. Returns True if it was subscribed."""
        return self._changed.unsubscribe(callback)

    def close(self) -> None:
        """Stop listening to the member controls.

        The form still answers queries; it just no longer re-publishes
        member changes.
        """
        for subscription in self._member_subscriptions:
            subscription.cancel()
        self._member_subscriptions.clear()
        self._changed.clear()

    def _on_member_changed(self, name: str, change: ControlChanged[Any]) -> None:
        logger.debug("%s member %s changed (valid=%s)", type(self).__name__, name, self.is_valid)
        self._changed.emit(FormChanged(form=self, field=name, change=change))

    def __repr__(self) -> str:
        members = ", ".join(self._controls)
        return f"<{type(self).__name__} [{members}] valid={self.is_valid}>"
