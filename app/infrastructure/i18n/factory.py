"""Factory functions for creating i18n components.

Provides convenience functions for initializing a Localiser from a table
string with defaults taken from the application settings.
"""

from typing import Dict, Optional, Union

from core.config import settings
from core.logging import get_module_logger
from infrastructure.i18n.context import LanguageContext
from infrastructure.i18n.loader import CSVTranslationLoader
from infrastructure.i18n.registry import LanguageRegistry
from infrastructure.i18n.translator import Localiser, set_localiser

logger = get_module_logger()


def create_localiser(
    table_text: Optional[str] = None,
    codes: Optional[Dict[str, str]] = None,
    default_language: Optional[Union[str, int]] = None,
    registry: Optional[LanguageRegistry] = None,
    install: bool = False,
) -> Localiser:
    """Create and configure a Localiser instance.

    Args:
        table_text: Raw translation table. When omitted no languages are
            loaded and the Localiser starts with no active language.
        codes: Header name -> OS locale code (default: settings.i18n.LANGUAGE_CODES).
        default_language: Code, localised name or column index to activate
            (default: settings.i18n.DEFAULT_LANGUAGE; empty leaves none active).
        registry: Registry to own the languages (default: a new registry).
        install: Whether to make the result the process-wide Localiser.

    Returns:
        Localiser: Configured localiser instance

    Raises:
        LanguageNotFoundError: If default_language names no loaded language.

    Usage:
        # Development mode, no translations
        localiser = create_localiser()

        # Load a table and start in French
        localiser = create_localiser(table_text=csv_text, default_language="fr-FR")
    """
    i18n_settings = settings.i18n
    registry = registry if registry is not None else LanguageRegistry()

    if table_text is not None:
        loader = CSVTranslationLoader(
            table_text,
            codes=codes if codes is not None else i18n_settings.LANGUAGE_CODES,
            delimiter=i18n_settings.DELIMITER,
            has_key_header=i18n_settings.KEY_HEADER,
        )
        registry.register_all(loader.load_all())

    localiser = Localiser(context=LanguageContext(), registry=registry)

    if default_language is None:
        default_language = i18n_settings.DEFAULT_LANGUAGE or None
    if default_language is not None:
        localiser.select_language(default_language)

    if install:
        set_localiser(localiser)

    logger.info(
        "localiser_created",
        languages=registry.codes(),
        active=localiser.language.code if localiser.language else None,
        installed=install,
    )
    return localiser
