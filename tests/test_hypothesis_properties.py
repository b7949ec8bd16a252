"""Property-based tests using Hypothesis for core components.

This module contains property tests that verify the freshness, validity,
idempotence and aggregation invariants of controls and forms.
"""

from __future__ import annotations

from typing import Any

from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from observable_form import ErrorState, Form, FormControl
from observable_form.validation import Validator, email, required
from tests.strategies import (
    STRING_VALIDATORS,
    any_value_strategy,
    email_strategy,
    string_value_strategy,
    validator_set_strategy,
)

# =============================================================================
# Validator Properties
# =============================================================================


class TestValidatorProperties:
    """Property tests for the built-in validators."""

    @given(any_value_strategy())
    @settings(max_examples=200)
    def test_builtins_are_total(self, value: Any) -> None:
        """Built-in validators return a bool for any value and never raise."""
        for validator in STRING_VALIDATORS:
            assert isinstance(validator.evaluate(value), bool)

    @given(any_value_strategy())
    def test_evaluate_is_deterministic(self, value: Any) -> None:
        for validator in STRING_VALIDATORS:
            assert validator.evaluate(value) == validator.evaluate(value)

    @given(email_strategy())
    def test_generated_emails_are_accepted(self, value: str) -> None:
        assert email.evaluate(value)
        assert required.evaluate(value)


# =============================================================================
# Control Properties
# =============================================================================


class TestControlProperties:
    """Property tests for FormControl."""

    @given(validator_set_strategy(), string_value_strategy(), string_value_strategy())
    @settings(max_examples=100, suppress_health_check=[HealthCheck.too_slow])
    def test_errors_match_validators_after_write(
        self, validators: list[Validator[Any]], initial: str, value: str
    ) -> None:
        """After a write, every entry equals "not evaluate(value)"."""
        control = FormControl(initial, validators=validators)
        control.value = value
        assert set(control.errors.failures) == {v.kind for v in validators}
        for validator in validators:
            assert control.errors[validator.kind] == (not validator.evaluate(value))

    @given(validator_set_strategy(), string_value_strategy())
    def test_valid_iff_no_failure(self, validators: list[Validator[Any]], value: str) -> None:
        control = FormControl(value, validators=validators)
        assert control.is_valid == (True not in control.errors.failures.values())

    @given(validator_set_strategy(), string_value_strategy())
    def test_rewriting_same_value_is_idempotent(
        self, validators: list[Validator[Any]], value: str
    ) -> None:
        control = FormControl("", validators=validators)
        control.value = value
        first = control.errors
        control.value = value
        assert control.errors == first

    @given(validator_set_strategy(), string_value_strategy())
    def test_order_does_not_change_results(
        self, validators: list[Validator[Any]], value: str
    ) -> None:
        """Full evaluation makes each kind's result independent of order."""
        forward = FormControl(value, validators=validators)
        backward = FormControl(value, validators=list(reversed(validators)))
        assert forward.errors == backward.errors
        assert forward.is_valid == backward.is_valid

    @given(st.lists(string_value_strategy(), min_size=1, max_size=10))
    def test_one_event_per_write(self, values: list[str]) -> None:
        control = FormControl("", validators=[required, email])
        seen: list[ErrorState] = []
        control.subscribe(lambda event: seen.append(event.errors))
        for value in values:
            control.value = value
        assert len(seen) == len(values)
        assert seen[-1] == control.errors


# =============================================================================
# Form Properties
# =============================================================================


class TestFormProperties:
    """Property tests for Form aggregation."""

    @given(st.lists(string_value_strategy(), min_size=0, max_size=6))
    @settings(max_examples=100, suppress_health_check=[HealthCheck.too_slow])
    def test_form_valid_iff_all_members_valid(self, values: list[str]) -> None:
        form = Form({f"f{i}": FormControl(v, [required, email]) for i, v in enumerate(values)})
        assert form.is_valid == all(form[name].is_valid for name in form)
        assert form.invalid_fields == [name for name in form if not form[name].is_valid]

    @given(
        st.lists(
            st.tuples(st.sampled_from(["name", "email"]), string_value_strategy()),
            max_size=15,
        )
    )
    def test_form_validity_tracks_writes(self, writes: list[tuple[str, str]]) -> None:
        form = Form(
            name=FormControl("", validators=[required]),
            email=FormControl("", validators=[required, email]),
        )
        observed: list[bool] = []
        form.subscribe(lambda event: observed.append(event.form.is_valid))
        for field, value in writes:
            form[field].value = value
            assert form.is_valid == (form.name.is_valid and form.email.is_valid)
        assert len(observed) == len(writes)
