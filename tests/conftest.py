"""Pytest configuration and shared fixtures for the texdoc test suite."""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from texdoc.ast import Document, DocumentClass, Paragraph, Section

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


@pytest.fixture
def sample_document() -> Document:
    """Provide a small article with a preamble, a nested section and a paragraph.

    Returns
    -------
    Document
        Article document used across renderer and visitor tests.

    """
    doc = Document(DocumentClass.ARTICLE)
    doc.preamble.set_title("Sample Document").set_author("Jane Doe").use_package("amsmath")

    details = Section("Details")
    details.push("Nested text.")

    intro = Section("Introduction")
    intro.push(Paragraph().push_text("Hello ").push_text("World"))
    intro.push(details)

    doc.push(intro)
    return doc
