"""Shared pytest fixtures and Hypothesis configuration.

This module provides pytest fixtures and configures Hypothesis profiles
for the test suite.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from hypothesis import Verbosity, settings

from ryandata_field_utils.validation.composites import RuleRegistry

# Configure Hypothesis settings for the test suite
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, deadline=None, verbosity=Verbosity.verbose)


@pytest.fixture
def restore_registry() -> Iterator[None]:
    """Undo rule registrations made by a test."""
    registered = set(RuleRegistry.available_rules())
    yield
    for name in set(RuleRegistry.available_rules()) - registered:
        RuleRegistry.unregister(name)
