"""Exceptions raised by the i18n system.

Lookup misses are not exceptions: they are returned as failed Results and
turned into the missing-string marker by the Localiser. The errors here are
programmer or data errors that must reach the caller.
"""


class LocalisationError(Exception):
    """Base class for localisation errors."""


class PlaceholderIndexError(LocalisationError, IndexError):
    """A template references an argument index beyond the supplied arguments.

    Attributes:
        template: Template string being formatted.
        arg_count: Number of arguments supplied.
    """

    def __init__(self, template: str, arg_count: int):
        self.template = template
        self.arg_count = arg_count
        super().__init__(
            f"Template {template!r} references an argument index beyond the "
            f"{arg_count} argument(s) supplied"
        )


class TemplateFormatError(LocalisationError, ValueError):
    """A template could not be formatted (bad braces, named fields, specs)."""

    def __init__(self, template: str, reason: str):
        self.template = template
        self.reason = reason
        super().__init__(f"Cannot format template {template!r}: {reason}")


class LanguageNotFoundError(LocalisationError, KeyError):
    """No registered language matches the requested identifier."""

    def __init__(self, identifier):
        self.identifier = identifier
        super().__init__(f"No language registered for {identifier!r}")

    def __str__(self) -> str:
        return self.args[0]
