"""Stateful property-based tests using Hypothesis for workflow testing.

This module contains stateful tests using Hypothesis's RuleBasedStateMachine
to test multi-step workflows: arbitrary sequences of writes, resets and
subscription changes against a form and its controls.
"""

from __future__ import annotations

import hypothesis.strategies as st
from hypothesis import HealthCheck, settings
from hypothesis.stateful import RuleBasedStateMachine, invariant, precondition, rule

from observable_form import FormChanged, Subscription
from observable_form.validation import email, required
from tests.forms import ProfileForm
from tests.strategies import INVALID_EMAILS, VALID_EMAILS, string_value_strategy

# =============================================================================
# ProfileForm State Machine
# =============================================================================


class ProfileFormStateMachine(RuleBasedStateMachine):
    """State machine for testing a form across arbitrary edit sequences.

    A shadow model tracks the expected value of each field and the number of
    form events an attached observer should have seen. After every step the
    form and its controls must agree with the model.
    """

    def __init__(self) -> None:
        super().__init__()
        self.form = ProfileForm()
        self.expected_values: dict[str, str] = {"name": "", "email": ""}
        self.events: list[FormChanged] = []
        self.expected_event_count = 0
        self.subscription: Subscription[FormChanged] | None = self.form.subscribe(
            self.events.append
        )

    def _write(self, field: str, value: str) -> None:
        self.form[field].value = value
        self.expected_values[field] = value
        if self.subscription is not None:
            self.expected_event_count += 1

    # =========================================================================
    # Rules for editing fields
    # =========================================================================

    @rule(value=string_value_strategy())
    def set_name(self, value: str) -> None:
        """Write an arbitrary name."""
        self._write("name", value)

    @rule(value=st.sampled_from(VALID_EMAILS + INVALID_EMAILS))
    def set_email(self, value: str) -> None:
        """Write a known-valid or known-invalid email."""
        self._write("email", value)

    @rule(value=string_value_strategy())
    def set_email_arbitrary(self, value: str) -> None:
        """Write arbitrary text to the email field."""
        self._write("email", value)

    @rule()
    def rewrite_email(self) -> None:
        """Write the current email again; errors must not change."""
        before = self.form.email.errors
        self._write("email", self.form.email.value)
        assert self.form.email.errors == before

    @rule()
    def reset_form(self) -> None:
        """Reset every field to its initial value."""
        self.form.reset()
        self.expected_values = {"name": "", "email": ""}
        if self.subscription is not None:
            self.expected_event_count += 2

    # =========================================================================
    # Rules for observation
    # =========================================================================

    @precondition(lambda self: self.subscription is not None)
    @rule()
    def detach_observer(self) -> None:
        assert self.subscription is not None
        self.subscription.cancel()
        self.subscription = None

    @precondition(lambda self: self.subscription is None)
    @rule()
    def attach_observer(self) -> None:
        self.subscription = self.form.subscribe(self.events.append)

    # =========================================================================
    # Invariants
    # =========================================================================

    @invariant()
    def values_match_model(self) -> None:
        assert self.form.values == self.expected_values

    @invariant()
    def errors_are_fresh(self) -> None:
        """Each control's errors reflect its current value."""
        name, mail = self.form.name.value, self.form.email.value
        assert self.form.name.errors["required"] == (not required.evaluate(name))
        assert self.form.email.errors["required"] == (not required.evaluate(mail))
        assert self.form.email.errors["email"] == (not email.evaluate(mail))

    @invariant()
    def form_validity_is_conjunction(self) -> None:
        assert self.form.is_valid == (self.form.name.is_valid and self.form.email.is_valid)

    @invariant()
    def observer_saw_every_change(self) -> None:
        assert len(self.events) == self.expected_event_count


# Create pytest test case
TestProfileForm = ProfileFormStateMachine.TestCase
TestProfileForm.settings = settings(
    max_examples=100,
    stateful_step_count=30,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)
