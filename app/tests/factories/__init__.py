"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_capture,
    make_language,
    make_localiser,
    make_table_text,
)

__all__ = [
    "make_capture",
    "make_language",
    "make_localiser",
    "make_table_text",
]
