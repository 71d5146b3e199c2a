"""Pytest configuration and shared fixtures for the htmlkit test suite.

This module registers the custom markers and Hypothesis profiles used
across the unit and integration suites.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from htmlkit import Container, ContainerType, HtmlPage, Table

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "property: Property-based tests driven by Hypothesis")


@pytest.fixture
def sample_table() -> Table:
    """Provide a 2x3 table with a header row."""
    return Table.from_rows([[1, 2, 3], [4, 5, 6]]).with_header_row(["A", "B", "C"])


@pytest.fixture
def sample_article() -> Container:
    """Provide an article with a heading and a paragraph."""
    return (
        Container(ContainerType.ARTICLE, [("id", "article1")])
        .with_header(2, "Hello, World", [("id", "article-head")])
        .with_paragraph("This is a simple HTML demo")
    )


@pytest.fixture
def empty_page() -> HtmlPage:
    """Provide an HTML5 page with no content."""
    return HtmlPage()
