"""Localiser service for resolving and formatting localised text.

Resolves a key, or a TemplateCapture's template key, in the active language
and substitutes positional arguments into the result. Lookup misses never
raise: they come back as a visible missing-string marker. With no active
language the source text itself is used, so the application runs without any
translation data loaded.
"""

import re
import string
import threading
from datetime import timedelta
from typing import Any, Optional, Sequence, Union

from core.logging import get_module_logger
from infrastructure.i18n.context import LanguageContext
from infrastructure.i18n.exceptions import (
    LanguageNotFoundError,
    PlaceholderIndexError,
    TemplateFormatError,
)
from infrastructure.i18n.models import Language
from infrastructure.i18n.registry import LanguageRegistry, get_language_registry
from infrastructure.i18n.template import TemplateCapture

logger = get_module_logger()

MISSING_STRING = '[MISSING STRING: "{0}"]'


def missing_string(identifier: Any) -> str:
    """Return the marker shown when no translation exists for ``identifier``."""
    return MISSING_STRING.format(identifier)


def _required_argument_count(template: str) -> int:
    """Return the highest positional argument index ``template`` uses, plus one.

    Automatic fields are numbered in appearance order, including fields
    nested in format specs. Named fields are not counted.
    """
    formatter = string.Formatter()
    required = 0
    auto_index = 0

    def walk(text: str) -> None:
        nonlocal required, auto_index
        for _, field_name, spec, _ in formatter.parse(text):
            if field_name is None:
                continue
            head = re.split(r"[.\[]", field_name, maxsplit=1)[0]
            if head == "":
                required = max(required, auto_index + 1)
                auto_index += 1
            elif head.isdigit():
                required = max(required, int(head) + 1)
            if spec:
                walk(spec)

    walk(template)
    return required


def substitute(template: str, args: Sequence[Any]) -> str:
    """Replace ``{i}`` placeholders in ``template`` with ``args[i]``.

    Args:
        template: Format template with positional placeholders.
        args: Ordered substitution values.

    Returns:
        Formatted string.

    Raises:
        PlaceholderIndexError: A placeholder index is >= len(args).
        TemplateFormatError: The template is otherwise malformed, including
            item access past the end of an argument (``{0[5]}``).
    """
    try:
        return template.format(*args)
    except IndexError as e:
        if _required_argument_count(template) > len(args):
            logger.error(
                "placeholder_index_out_of_range",
                template=template,
                arg_count=len(args),
            )
            raise PlaceholderIndexError(template, len(args)) from e
        logger.error("template_format_failed", template=template, error=str(e))
        raise TemplateFormatError(template, str(e)) from e
    except (KeyError, ValueError, AttributeError, TypeError) as e:
        logger.error("template_format_failed", template=template, error=str(e))
        raise TemplateFormatError(template, str(e)) from e


class Localiser:
    """Service that localises text to the active language.

    Attributes:
        context: LanguageContext holding the active language.
        registry: LanguageRegistry used to resolve language identifiers.
    """

    def __init__(
        self,
        context: Optional[LanguageContext] = None,
        registry: Optional[LanguageRegistry] = None,
    ):
        self.context = context or LanguageContext()
        self.registry = registry if registry is not None else get_language_registry()

    @property
    def language(self) -> Optional[Language]:
        """Current language everything is being localised to."""
        return self.context.language

    def select_language(self, language: Union[Language, str, int]) -> Language:
        """Set the active language.

        Args:
            language: A Language, or a code, localised name or column index
                registered in the registry.

        Returns:
            The Language now active.

        Raises:
            LanguageNotFoundError: If an identifier matches no registered language.
        """
        if not isinstance(language, Language):
            found = self.registry.find(language)
            if found is None:
                logger.warning(
                    "language_not_found",
                    identifier=language,
                    available=self.registry.codes(),
                )
                raise LanguageNotFoundError(language)
            language = found

        self.context.select(language)
        return language

    def runtime(self, raw: str) -> str:
        """Mark text to be pulled for localisation without localising it.

        Needed where text is created early (e.g. default values) and
        localised later with text().
        """
        return raw

    def text(self, raw: Optional[str], *args: Any) -> Optional[str]:
        """Return the localised version of ``raw`` for the active language.

        ``raw`` doubles as the localisation key. If the active language has no
        entry for it, returns ``[MISSING STRING: "<raw>"]``. If no language is
        active, ``raw`` itself is formatted with ``args``; a None ``raw`` then
        gives None.

        Raises:
            PlaceholderIndexError: The template references a missing argument.
            TemplateFormatError: The template is malformed.
        """
        language = self.context.snapshot()
        if language is not None:
            result = language.get(raw)
            if not result.has_value:
                logger.warning(
                    "translation_not_found",
                    key=raw,
                    language=language.code,
                    error=result.error,
                )
                return missing_string(raw)
            return substitute(result.value, args)

        return substitute(raw, args) if raw is not None else None

    def text_template(self, capture: TemplateCapture) -> str:
        """Return the localised version of captured text.

        Looks up ``capture.template_key`` and substitutes ``capture.values``.
        On a miss returns ``[MISSING STRING: "<realized text>"]``. With no
        active language returns the realized text unchanged.

        Raises:
            PlaceholderIndexError: The translation references a missing value.
            TemplateFormatError: The translation is malformed.
        """
        language = self.context.snapshot()
        if language is not None:
            result = language.get(capture.template_key)
            if not result.has_value:
                logger.warning(
                    "translation_not_found",
                    key=capture.template_key,
                    language=language.code,
                    error=result.error,
                )
                return missing_string(capture.realized_text)
            return substitute(result.value, capture.values)

        return capture.realized_text

    # TODO: map number, currency, date and time_span to the active language.

    def number(self, formatting: str, n: float) -> str:
        """Return a number formatted with ``formatting`` (``{0}`` style)."""
        return formatting.format(n)

    def currency(self, amount: float) -> str:
        """Return an amount of money, e.g. "£5"."""
        return "£{0}".format(amount)

    def date(self, day: int, month: int, year: int) -> str:
        return "{0}/{1}/{2}".format(day, month, year)

    def time_span(self, span: timedelta) -> str:
        hours, remainder = divmod(span.seconds, 3600)
        return "{0}d, {1}h, {2} m".format(span.days, hours, remainder // 60)


_default_localiser: Optional[Localiser] = None
_default_localiser_lock = threading.Lock()


def get_localiser() -> Localiser:
    """Return the process-wide Localiser, creating it on first use."""
    global _default_localiser

    if _default_localiser is None:
        with _default_localiser_lock:
            if _default_localiser is None:
                _default_localiser = Localiser()

    return _default_localiser


def set_localiser(localiser: Localiser) -> None:
    """Replace the process-wide Localiser (used by the factory and tests)."""
    global _default_localiser
    _default_localiser = localiser


def text(raw: Optional[str], *args: Any) -> Optional[str]:
    return get_localiser().text(raw, *args)


def text_template(capture: TemplateCapture) -> str:
    return get_localiser().text_template(capture)


def runtime(raw: str) -> str:
    return get_localiser().runtime(raw)
