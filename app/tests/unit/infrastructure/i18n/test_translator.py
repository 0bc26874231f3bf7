"""Tests for infrastructure.i18n.translator module."""

# pylint: disable=protected-access

from datetime import timedelta

import pytest

from infrastructure.i18n import (
    LanguageNotFoundError,
    Localiser,
    PlaceholderIndexError,
    TemplateCapture,
    TemplateFormatError,
    missing_string,
    substitute,
)
from infrastructure.i18n import translator as translator_module
from tests.factories.i18n import make_capture, make_language, make_localiser


@pytest.mark.unit
class TestSubstitute:
    """Tests for positional substitution."""

    def test_positional(self):
        assert substitute("{1} : {0}", ["a", "b"]) == "b : a"

    def test_repeated_placeholder(self):
        assert substitute("{0}{0}", ["x"]) == "xx"

    def test_extra_arguments_ignored(self):
        assert substitute("{0}", ["a", "b"]) == "a"

    def test_values_are_stringified(self):
        assert substitute("{0} items", [3]) == "3 items"

    def test_index_out_of_range_raises(self):
        with pytest.raises(PlaceholderIndexError) as exc_info:
            substitute("Hello {1}", ["only one"])
        assert exc_info.value.arg_count == 1
        assert exc_info.value.template == "Hello {1}"

    def test_index_error_is_index_error(self):
        with pytest.raises(IndexError):
            substitute("{0}", [])

    def test_item_access_out_of_range_is_format_error(self):
        """An index into an argument is not a missing placeholder argument."""
        with pytest.raises(TemplateFormatError):
            substitute("{0[5]}", [[1, 2]])

    def test_automatic_field_out_of_range_raises(self):
        with pytest.raises(PlaceholderIndexError):
            substitute("{} and {}", ["one"])

    def test_nested_spec_out_of_range_raises(self):
        with pytest.raises(PlaceholderIndexError):
            substitute("{0:{1}}", ["x"])

    def test_malformed_template_raises(self):
        with pytest.raises(TemplateFormatError):
            substitute("Hello {", ["x"])

    def test_named_field_raises(self):
        with pytest.raises(TemplateFormatError):
            substitute("Hello {name}", ["x"])


@pytest.mark.unit
class TestMissingString:
    def test_format(self):
        assert missing_string("Missing Key") == '[MISSING STRING: "Missing Key"]'


@pytest.mark.unit
class TestLocaliserWithoutLanguage:
    """Resolution when no language is active."""

    def test_text_formats_raw(self, localiser):
        assert localiser.text("Hello {0}", "World") == "Hello World"

    def test_text_without_args(self, localiser):
        assert localiser.text("Plain") == "Plain"

    def test_text_none_propagates(self, localiser):
        assert localiser.text(None) is None

    def test_text_out_of_range_raises(self, localiser):
        with pytest.raises(PlaceholderIndexError):
            localiser.text("Hello {0} and {1}", "World")

    def test_text_template_returns_realized_text(self, localiser):
        capture = make_capture("Score: ", 10)
        assert localiser.text_template(capture) == "Score: 10"

    def test_text_template_does_not_reformat(self, localiser):
        """Realized text is returned as-is even if it contains braces."""
        capture = make_capture("Set ", "{0}")
        assert localiser.text_template(capture) == "Set {0}"

    def test_language_is_none(self, localiser):
        assert localiser.language is None


@pytest.mark.unit
class TestLocaliserWithLanguage:
    """Resolution with an active language."""

    def test_text_hit(self, french_localiser):
        assert french_localiser.text("Hello {0}", "Marie") == "Bonjour Marie"

    def test_text_reorders_arguments(self, french_localiser):
        assert french_localiser.text("{0} of {1}", "3", "10") == "10 : 3"

    def test_text_miss_returns_marker(self, french_localiser):
        assert (
            french_localiser.text("Missing Key") == '[MISSING STRING: "Missing Key"]'
        )

    def test_text_miss_does_not_format(self, french_localiser):
        assert (
            french_localiser.text("Unknown {0}", "x")
            == '[MISSING STRING: "Unknown {0}"]'
        )

    def test_text_translation_out_of_range_raises(self):
        localiser = make_localiser(
            language=make_language(entries={"Hello {0}": "Bonjour {0} {1}"})
        )
        with pytest.raises(PlaceholderIndexError):
            localiser.text("Hello {0}", "Marie")

    def test_text_template_hit(self, french_localiser):
        capture = make_capture("Score: ", 42)
        assert french_localiser.text_template(capture) == "Score : 42"

    def test_text_template_miss_uses_realized_text(self, french_localiser):
        capture = make_capture("Lives: ", 3)
        assert (
            french_localiser.text_template(capture) == '[MISSING STRING: "Lives: 3"]'
        )

    def test_text_template_from_format(self, french_localiser):
        capture = TemplateCapture.from_format("Hello {}", "Marie")
        assert french_localiser.text_template(capture) == "Bonjour Marie"

    def test_idempotent(self, french_localiser):
        first = french_localiser.text("Hello {0}", "Marie")
        second = french_localiser.text("Hello {0}", "Marie")
        assert first == second

    def test_switch_changes_only_later_calls(self, french_localiser):
        before = french_localiser.text("Hello {0}", "Marie")
        french_localiser.select_language("de-DE")
        after = french_localiser.text("Hello {0}", "Marie")

        assert before == "Bonjour Marie"
        assert after == "Hallo Marie"

    def test_select_by_name_and_index(self, french_localiser, german, french):
        assert french_localiser.select_language("Deutsch") is german
        assert french_localiser.select_language(1) is french

    def test_select_unknown_raises(self, french_localiser, french):
        with pytest.raises(LanguageNotFoundError):
            french_localiser.select_language("xx-XX")
        assert french_localiser.language is french

    def test_select_language_object(self, localiser, french):
        localiser.select_language(french)
        assert localiser.language is french


@pytest.mark.unit
class TestLocaliserHelpers:
    """Tests for runtime() and the formatting entry points."""

    def test_runtime_is_identity(self, french_localiser):
        raw = "Start Game"
        assert french_localiser.runtime(raw) is raw

    def test_number(self, localiser):
        assert localiser.number("{0:.1f}", 2.25) == "2.2"

    def test_currency(self, localiser):
        assert localiser.currency(5) == "£5"

    def test_date(self, localiser):
        assert localiser.date(1, 2, 2024) == "1/2/2024"

    def test_time_span(self, localiser):
        span = timedelta(days=2, hours=5, minutes=7, seconds=30)
        assert localiser.time_span(span) == "2d, 5h, 7 m"


@pytest.mark.unit
class TestModuleLevelLocaliser:
    """Tests for the process-wide Localiser helpers."""

    @pytest.fixture(autouse=True)
    def restore_default(self):
        original = translator_module._default_localiser
        yield
        translator_module._default_localiser = original

    def test_get_localiser_is_singleton(self):
        translator_module._default_localiser = None
        first = translator_module.get_localiser()
        assert isinstance(first, Localiser)
        assert translator_module.get_localiser() is first

    def test_module_functions_use_installed_localiser(self, french_localiser):
        translator_module.set_localiser(french_localiser)
        assert translator_module.text("Hello {0}", "Ana") == "Bonjour Ana"
        assert (
            translator_module.text_template(make_capture("Score: ", 1)) == "Score : 1"
        )
        assert translator_module.runtime("x") == "x"
