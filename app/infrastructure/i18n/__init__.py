"""i18n system - localisation of text keys into translated strings.

Loads a delimited translation table, holds the active language and resolves
keys or captured templates into localised text with positional arguments.

Main components:
- loader: parse_table, CSVTranslationLoader
- models: Language
- template: TemplateCapture
- context: LanguageContext (active-language state)
- registry: LanguageRegistry
- translator: Localiser with missing-string fallback and format stubs
- factory: create_localiser
"""

from infrastructure.i18n.context import LanguageContext
from infrastructure.i18n.exceptions import (
    LanguageNotFoundError,
    LocalisationError,
    PlaceholderIndexError,
    TemplateFormatError,
)
from infrastructure.i18n.factory import create_localiser
from infrastructure.i18n.loader import (
    CSVTranslationLoader,
    TranslationLoader,
    header_names,
    parse_table,
    split_row,
)
from infrastructure.i18n.models import Language
from infrastructure.i18n.registry import LanguageRegistry, get_language_registry
from infrastructure.i18n.template import TemplateCapture
from infrastructure.i18n.translator import (
    MISSING_STRING,
    Localiser,
    get_localiser,
    missing_string,
    runtime,
    set_localiser,
    substitute,
    text,
    text_template,
)

__all__ = [
    "Language",
    "LanguageContext",
    "LanguageRegistry",
    "get_language_registry",
    "TranslationLoader",
    "CSVTranslationLoader",
    "parse_table",
    "header_names",
    "split_row",
    "TemplateCapture",
    "Localiser",
    "get_localiser",
    "set_localiser",
    "text",
    "text_template",
    "runtime",
    "substitute",
    "missing_string",
    "MISSING_STRING",
    "create_localiser",
    "LocalisationError",
    "PlaceholderIndexError",
    "TemplateFormatError",
    "LanguageNotFoundError",
]
