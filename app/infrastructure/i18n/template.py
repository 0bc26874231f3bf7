"""Capture of mixed literal/value text as a stable localisation key.

A TemplateCapture is filled left to right with literal fragments and
interpolated values. It produces three things at once:

- ``realized_text``: literals and stringified values, as the text would read
  with no translation at all.
- ``template_key``: literals with ``{0}``, ``{1}``... markers in place of the
  values. It is the same for every call that shares the literal skeleton, so
  one table entry serves every runtime value.
- ``values``: the interpolated values in order; ``{i}`` refers to ``values[i]``.

Example:
    capture = TemplateCapture.build("Score: ", points)
    capture.template_key   # "Score: {0}"
    capture.realized_text  # "Score: 42"

Instances carry running state and belong to a single call site; do not share
or reuse them.
"""

import string
from typing import Any, List, Tuple


class TemplateCapture:
    """Builder that records a literal/value sequence."""

    __slots__ = ("_realized", "_template", "_values")

    def __init__(self):
        self._realized: List[str] = []
        self._template: List[str] = []
        self._values: List[Any] = []

    def append_literal(self, text: str) -> "TemplateCapture":
        """Append ``text`` verbatim to both the realized text and the key."""
        self._realized.append(text)
        self._template.append(text)
        return self

    def append_value(self, value: Any) -> "TemplateCapture":
        """Append an interpolated value.

        The realized text gets ``str(value)``, the key gets the next
        positional marker, and ``value`` itself is kept for substitution.
        """
        self._append_formatted(value, str(value))
        return self

    @property
    def realized_text(self) -> str:
        return "".join(self._realized)

    @property
    def template_key(self) -> str:
        return "".join(self._template)

    @property
    def values(self) -> Tuple[Any, ...]:
        return tuple(self._values)

    @classmethod
    def build(cls, *parts: Any) -> "TemplateCapture":
        """Build a capture from alternating literal and value parts.

        Even positions are literals, odd positions are values, mirroring how
        an interpolated string reads left to right::

            TemplateCapture.build("Hello ", name, ", you have ", count, " new")

        Args:
            *parts: literal, value, literal, value, ... (literal first).

        Returns:
            Populated TemplateCapture.
        """
        capture = cls()
        for position, part in enumerate(parts):
            if position % 2 == 0:
                if not isinstance(part, str):
                    raise TypeError(
                        f"Literal at position {position} must be str, "
                        f"got {type(part).__name__}"
                    )
                capture.append_literal(part)
            else:
                capture.append_value(part)
        return capture

    @classmethod
    def from_format(cls, fmt: str, *args: Any, **kwargs: Any) -> "TemplateCapture":
        """Build a capture from a ``str.format`` style string and its arguments.

        Each replacement field becomes one captured value, in the order the
        fields appear. Format specs and conversions shape the realized text
        only; the key always uses the bare positional marker.

        Example:
            TemplateCapture.from_format("Score: {:>3}", 7).template_key
            # "Score: {0}"

        Raises:
            IndexError: Automatic or explicit index beyond ``args``.
            KeyError: Named field missing from ``kwargs``.
            ValueError: Malformed format string, or mixed automatic and
                manual numbering.
        """
        formatter = string.Formatter()
        capture = cls()
        auto_index = 0
        manual = False

        # Outer fields and fields nested in their specs share one numbering,
        # as in str.format. Named fields count as neither kind.
        def resolve(field_name: str) -> Any:
            nonlocal auto_index, manual
            if field_name == "" or field_name[0] in ".[":
                if manual:
                    raise ValueError(
                        "cannot switch from manual field specification "
                        "to automatic field numbering"
                    )
                field_name = str(auto_index) + field_name
                auto_index += 1
            elif field_name[0].isdigit():
                if auto_index:
                    raise ValueError(
                        "cannot switch from automatic field numbering "
                        "to manual field specification"
                    )
                manual = True
            obj, _ = formatter.get_field(field_name, args, kwargs)
            return obj

        def expand_spec(spec: str) -> str:
            parts = []
            for literal, field_name, nested_spec, conversion in formatter.parse(spec):
                parts.append(literal)
                if field_name is not None:
                    obj = formatter.convert_field(resolve(field_name), conversion)
                    parts.append(format(obj, nested_spec or ""))
            return "".join(parts)

        for literal, field_name, spec, conversion in formatter.parse(fmt):
            if literal:
                capture.append_literal(literal)
            if field_name is None:
                continue

            obj = formatter.convert_field(resolve(field_name), conversion)
            if spec:
                capture._append_formatted(obj, format(obj, expand_spec(spec)))
            else:
                capture.append_value(obj)

        return capture

    def _append_formatted(self, value: Any, rendered: str) -> None:
        self._realized.append(rendered)
        self._template.append("{" + str(len(self._values)) + "}")
        self._values.append(value)

    def __repr__(self) -> str:
        return (
            f"TemplateCapture(template_key={self.template_key!r}, "
            f"values={self.values!r})"
        )
