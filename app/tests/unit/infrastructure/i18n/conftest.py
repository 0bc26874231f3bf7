"""Feature-level fixtures for i18n system tests.

Provides sample tables, languages and isolated localisers.
"""

import pytest

from infrastructure.i18n import Language, LanguageRegistry
from tests.factories.i18n import (
    SAMPLE_TABLE,
    make_language,
    make_localiser,
)


@pytest.fixture
def sample_table():
    """Two-language table with a quoted key and quoted values.

    Columns: English, Français. Ends with a trailing newline.
    """
    return SAMPLE_TABLE


@pytest.fixture
def french():
    """Initialised French Language (index 1, code fr-FR)."""
    return make_language()


@pytest.fixture
def german():
    """Initialised German Language (index 2, code de-DE)."""
    return make_language(
        index=2,
        localised_name="Deutsch",
        code="de-DE",
        entries={"Hello {0}": "Hallo {0}", "Score: {0}": "Punkte: {0}"},
    )


@pytest.fixture
def registry(french, german):
    """Registry owning the French and German languages."""
    registry = LanguageRegistry()
    registry.register_all([french, german])
    return registry


@pytest.fixture
def localiser():
    """Localiser with no active language."""
    return make_localiser()


@pytest.fixture
def french_localiser(french, registry):
    """Localiser with French active and German registered."""
    return make_localiser(language=french, registry=registry)


@pytest.fixture
def empty_language():
    """Language constructed but never initialised."""
    return Language(0, "English", "en-GB")
