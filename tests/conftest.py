#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/conftest.py
"""Pytest configuration and shared fixtures for the md2html test suite."""

import os
from io import StringIO

import pytest
from hypothesis import Phase, Verbosity, settings

from md2html.options import HtmlRendererOptions
from md2html.renderers.html import HtmlRenderer

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=50)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "fuzzing: Property-based tests using Hypothesis")


@pytest.fixture
def renderer() -> HtmlRenderer:
    """Provide an HTML renderer with default options."""
    return HtmlRenderer(HtmlRendererOptions())


@pytest.fixture
def buffer() -> StringIO:
    """Provide an empty in-memory output buffer."""
    return StringIO()
