"""Translation models for i18n system.

A Language wraps one column of the translation table: the key -> string
mapping for a single language plus its identity (column index, localised
display name and OS locale code).
"""

from typing import Dict, Iterator

from core.logging import get_module_logger
from infrastructure.operations import Result

logger = get_module_logger()


class Language:
    """Contains the translations for one language.

    Constructed with its identity first and filled later by init(), so a
    language can be registered before its data has finished loading. Callers
    must make sure init() has completed before relying on get().

    Attributes:
        index: Column position of this language in the translation table.
        localised_name: Name of the language within the language, e.g. "Español".
        code: Corresponding language identifier of the operating system.
    """

    __slots__ = ("_index", "_localised_name", "_code", "_entries")

    def __init__(self, index: int, localised_name: str, code: str):
        self._index = index
        self._localised_name = localised_name
        self._code = code
        self._entries: Dict[str, str] = {}

    @property
    def index(self) -> int:
        return self._index

    @property
    def localised_name(self) -> str:
        return self._localised_name

    @property
    def code(self) -> str:
        return self._code

    def init(self, entries: Dict[str, str]) -> None:
        """Set up the map of localisation keys to translated strings.

        Args:
            entries: Mapping of localisation key to translated string.
        """
        if self._entries:
            logger.warning(
                "language_entries_replaced",
                language=self._localised_name,
                previous_count=len(self._entries),
                new_count=len(entries),
            )
        self._entries = dict(entries)

    def get(self, key: str) -> Result[str]:
        """Attempt to get a localised string given a key.

        Args:
            key: Localisation key.

        Returns:
            Result holding the translated string, or an error naming the key
            and this language.
        """
        if key in self._entries:
            return Result.success(self._entries[key])
        return Result.failure(
            'Failed to find string with localisation key "{0}" in language "{1}"'.format(
                key, self._localised_name
            )
        )

    def keys(self) -> Iterator[str]:
        return iter(self._entries.keys())

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return (
            f"Language(index={self._index!r}, localised_name={self._localised_name!r}, "
            f"code={self._code!r})"
        )
