"""Shared pytest fixtures and Hypothesis configuration.

This module provides pytest fixtures and configures Hypothesis profiles
for the test suite.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from hypothesis import Verbosity, settings

from observable_form.validation import ValidatorFactory
from tests.forms import ProfileForm

# Configure Hypothesis settings for the test suite
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, deadline=None, verbosity=Verbosity.verbose)


@pytest.fixture
def profile_form() -> ProfileForm:
    return ProfileForm()


@pytest.fixture
def validator_registry() -> Iterator[type[ValidatorFactory]]:
    """Give a test the ValidatorFactory and restore its registry afterwards."""
    ValidatorFactory.available_types()
    saved = dict(ValidatorFactory._registry)
    yield ValidatorFactory
    ValidatorFactory.clear_registry()
    ValidatorFactory._registry.update(saved)
