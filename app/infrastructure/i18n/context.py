"""Active-language state for the Localiser.

The active language is the only mutable state shared by resolve calls.
Writes swap a single reference under a lock; reads take one snapshot of the
reference and use it for their whole lookup and substitution, so a
concurrent switch is seen either fully or not at all.
"""

import threading
from typing import Optional

from core.logging import get_module_logger
from infrastructure.i18n.models import Language

logger = get_module_logger()


class LanguageContext:
    """Holder for the currently selected Language.

    Starts with no active language. select() moves it to a language and
    re-select() moves it to another; there is no way back to "none".

    Attributes:
        _language: Current active Language, or None.
        _lock: Serialises writers.
    """

    def __init__(self, language: Optional[Language] = None):
        self._language: Optional[Language] = None
        self._lock = threading.Lock()
        if language is not None:
            self.select(language)

    @property
    def language(self) -> Optional[Language]:
        """Current active language, or None if none was selected."""
        return self._language

    @property
    def is_active(self) -> bool:
        return self._language is not None

    def snapshot(self) -> Optional[Language]:
        """Return a stable reference to the active language for one call."""
        return self._language

    def select(self, language: Language) -> None:
        """Make ``language`` the active language.

        Args:
            language: Initialised Language to activate.

        Raises:
            TypeError: If ``language`` is not a Language.
        """
        if not isinstance(language, Language):
            raise TypeError(
                f"Expected a Language, got {type(language).__name__}"
            )

        with self._lock:
            previous = self._language
            self._language = language

        logger.info(
            "language_selected",
            language=language.localised_name,
            code=language.code,
            previous=previous.code if previous else None,
        )
