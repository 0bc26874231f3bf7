"""Language registry for managing loaded languages.

Provides thread-safe registration and retrieval of Language objects. The
registry owns the languages; the active-language context only points into it.
"""

import threading
from typing import Dict, Iterable, List, Optional, Union

from core.logging import get_module_logger
from infrastructure.i18n.exceptions import LanguageNotFoundError
from infrastructure.i18n.models import Language

logger = get_module_logger()


class LanguageRegistry:
    """Thread-safe registry of loaded languages keyed by OS locale code.

    Attributes:
        _languages: Dict mapping code to Language, in registration order.
        _lock: Threading lock for thread-safe operations.
    """

    def __init__(self):
        self._languages: Dict[str, Language] = {}
        self._lock = threading.Lock()

    def register(self, language: Language) -> None:
        """Register a language.

        Args:
            language: Language to register (may still be awaiting init()).

        Raises:
            ValueError: If a language with the same code is already registered.
        """
        with self._lock:
            if language.code in self._languages:
                raise ValueError(
                    f"Language with code '{language.code}' is already registered"
                )
            self._languages[language.code] = language

        logger.info(
            "language_registered",
            code=language.code,
            language=language.localised_name,
            index=language.index,
        )

    def register_all(self, languages: Iterable[Language]) -> None:
        for language in languages:
            self.register(language)

    def get(self, code: str) -> Language:
        """Get a language by its OS locale code.

        Raises:
            LanguageNotFoundError: If no language has that code.
        """
        with self._lock:
            language = self._languages.get(code)
        if language is None:
            raise LanguageNotFoundError(code)
        return language

    def find(self, identifier: Union[str, int]) -> Optional[Language]:
        """Find a language by code, localised name or column index.

        Args:
            identifier: Code or localised name (str), or column index (int).

        Returns:
            Matching Language, or None.
        """
        with self._lock:
            languages = list(self._languages.values())

        if isinstance(identifier, int):
            return next((lang for lang in languages if lang.index == identifier), None)

        for language in languages:
            if language.code == identifier:
                return language
        for language in languages:
            if language.localised_name == identifier:
                return language
        return None

    def list_languages(self) -> List[Language]:
        with self._lock:
            return list(self._languages.values())

    def codes(self) -> List[str]:
        with self._lock:
            return list(self._languages.keys())

    def clear(self) -> None:
        """Remove every registered language."""
        with self._lock:
            self._languages.clear()
        logger.info("language_registry_cleared")

    def __contains__(self, code: object) -> bool:
        with self._lock:
            return code in self._languages

    def __len__(self) -> int:
        with self._lock:
            return len(self._languages)


# Global registry instance
_global_registry: Optional[LanguageRegistry] = None
_global_registry_lock = threading.Lock()


def get_language_registry() -> LanguageRegistry:
    """Get the global language registry singleton.

    Thread-safe singleton pattern. Creates the registry on first call.
    """
    global _global_registry

    if _global_registry is None:
        with _global_registry_lock:
            # Double-check locking pattern
            if _global_registry is None:
                _global_registry = LanguageRegistry()
                logger.debug("global_language_registry_initialized")

    return _global_registry
