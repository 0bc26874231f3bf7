"""Translation loading interface and implementations.

Defines the contract for loading languages and provides the delimited-table
loader. The table is handed in as a single string; fetching it from disk or
network is the host application's job.

Table layout::

    English,Français
    Hello {0},Bonjour {0}
    "Apples, pears","Pommes, poires"

Line 0 names one language per column. Every following line is
``key,value_lang0,value_lang1,...``. Fields may be quoted, and a quoted field
may contain the delimiter.
"""

import re
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from core.logging import get_module_logger
from infrastructure.i18n.models import Language

logger = get_module_logger()

QUOTE = '"'


def _split_pattern(delimiter: str) -> "re.Pattern[str]":
    # A delimiter is a boundary only when an even number of quotes follow it.
    d = re.escape(delimiter)
    return re.compile(f'{d}(?=(?:[^"]*"[^"]*")*[^"]*$)')


def _clean(field: str) -> str:
    """Strip whitespace and at most one quote character at each end."""
    field = field.strip()
    if field.startswith(QUOTE):
        field = field[1:]
    if field.endswith(QUOTE):
        field = field[:-1]
    return field


def split_row(line: str, delimiter: str = ",") -> List[str]:
    """Split one data line into cleaned fields.

    Quoted fields keep their delimiters. A line with an odd number of quotes
    is treated as if it were terminated at end of line: the stray quote opens
    a field that runs to the end of the line.

    Args:
        line: Raw data line (without the newline).
        delimiter: Single field delimiter character.

    Returns:
        List of cleaned fields.
    """
    line = line.strip()
    unterminated = line.count(QUOTE) % 2 == 1
    if unterminated:
        logger.warning("table_row_unbalanced_quotes", line=line)
        line += QUOTE

    fields = _split_pattern(delimiter).split(line)
    if unterminated:
        fields[-1] = fields[-1][:-1]
    return [_clean(field) for field in fields]


def header_names(
    text: str, delimiter: str = ",", has_key_header: bool = False
) -> List[str]:
    """Return the cleaned language names from the header line.

    Args:
        text: Full table text.
        delimiter: Single field delimiter character.
        has_key_header: Whether header field 0 labels the key column rather
            than naming a language.

    Returns:
        One name per language column.
    """
    header = text.split("\n", 1)[0].strip()
    if not header:
        return []

    names = [_clean(name) for name in header.split(delimiter)]
    # Terminal delimiter leaves an empty artefact
    if names and names[-1] == "":
        names.pop()
    if has_key_header and names:
        names.pop(0)
    return names


def parse_table(
    text: str, delimiter: str = ",", has_key_header: bool = False
) -> List[Dict[str, str]]:
    """Parse a delimited translation table into one mapping per language.

    Args:
        text: Full table text, lines separated by newlines.
        delimiter: Single field delimiter character.
        has_key_header: Whether header field 0 labels the key column.

    Returns:
        List of key -> translated string mappings, one per header language,
        in column order.
    """
    names = header_names(text, delimiter, has_key_header)
    data: List[Dict[str, str]] = [{} for _ in names]

    lines = text.split("\n")
    for line_number, line in enumerate(lines[1:], start=2):
        if not line.strip():
            continue

        fields = split_row(line, delimiter)
        key, values = fields[0], fields[1:]

        if len(values) < len(data):
            logger.debug(
                "table_row_short",
                line_number=line_number,
                key=key,
                expected=len(data),
                found=len(values),
            )
        elif len(values) > len(data):
            logger.warning(
                "table_row_extra_fields",
                line_number=line_number,
                key=key,
                expected=len(data),
                found=len(values),
            )

        for column, value in enumerate(values[: len(data)]):
            data[column][key] = value

    logger.info(
        "parsed_translation_table",
        language_count=len(data),
        line_count=len(lines),
    )
    return data


class TranslationLoader(ABC):
    """Abstract base for translation loaders.

    Implementations define where the table comes from and how its columns
    become Language objects.
    """

    @abstractmethod
    def load_all(self) -> List[Language]:
        """Load every language the source provides.

        Returns:
            Initialised Language objects in column order.
        """
        pass


class CSVTranslationLoader(TranslationLoader):
    """Loader for a delimited translation table held in memory.

    Attributes:
        text: Raw table text.
        codes: Mapping of header name to OS locale code.
        delimiter: Field delimiter.
        has_key_header: Whether header field 0 labels the key column.
    """

    def __init__(
        self,
        text: str,
        codes: Optional[Dict[str, str]] = None,
        delimiter: str = ",",
        has_key_header: bool = False,
    ):
        self.text = text
        self.codes = codes or {}
        self.delimiter = delimiter
        self.has_key_header = has_key_header

    def load_all(self) -> List[Language]:
        """Build and initialise one Language per table column.

        A language's code is looked up in ``codes`` by header name and
        defaults to the header name itself.
        """
        names = header_names(self.text, self.delimiter, self.has_key_header)
        mappings = parse_table(self.text, self.delimiter, self.has_key_header)

        languages = []
        for index, (name, entries) in enumerate(zip(names, mappings)):
            language = Language(index, name, self.codes.get(name, name))
            language.init(entries)
            languages.append(language)

        logger.info(
            "loaded_languages",
            languages=[language.code for language in languages],
        )
        return languages
