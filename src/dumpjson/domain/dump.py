"""Tagged dump shapes and one-shot shape classification.

A tagged dump is an ordered mapping with an optional ``$type`` tag and
either exactly one of the reserved keys:

- ``value``: scalar dump wrapping a primitive
- ``Items``: list-like dump wrapping a sequence of nested dumps
- ``Entries``: record-like dump wrapping a flat ``key, value, ...`` sequence

or several arbitrary keys (composite dump, e.g. control-loop or range state).

INVARIANT: the shape is computed once from the key set by :func:`classify`;
callers branch on :class:`DumpShape` and never re-inspect the keys.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from dumpjson.domain.errors import EmptyDumpError, NotADumpError, UnrecognizedDumpKeyError

TYPE_KEY = "$type"
VALUE_KEY = "value"
ITEMS_KEY = "Items"
ENTRIES_KEY = "Entries"

Dump = Mapping[Any, Any]


class DumpShape(StrEnum):
    """The closed set of dump shapes."""

    SCALAR = "scalar"
    LIST_LIKE = "list_like"
    RECORD_LIKE = "record_like"
    COMPOSITE = "composite"


_SINGLE_KEY_SHAPES: dict[str, DumpShape] = {
    VALUE_KEY: DumpShape.SCALAR,
    ITEMS_KEY: DumpShape.LIST_LIKE,
    ENTRIES_KEY: DumpShape.RECORD_LIKE,
}


@dataclass(frozen=True)
class ClassifiedDump:
    """A dump paired with its shape.

    Attributes:
        shape: Which of the four shapes the dump has.
        fields: Every key except ``$type``, in input order.
    """

    shape: DumpShape
    fields: dict[Any, Any]

    @property
    def payload(self) -> Any:
        """The single held value of a scalar, list-like or record-like dump."""
        return next(iter(self.fields.values()))


def is_dump(value: Any) -> bool:
    """Whether *value* can be read as a nested dump."""
    return isinstance(value, Mapping)


def as_sequence(payload: Any) -> Sequence[Any] | None:
    """Return *payload* when it is a list-like sequence, else None.

    Strings and bytes are sequences to Python but never to the host.
    """
    if isinstance(payload, (list, tuple)):
        return payload
    return None


def classify(dump: Any) -> ClassifiedDump:
    """Compute the shape of *dump*.

    Raises:
        NotADumpError: *dump* is not a mapping.
        EmptyDumpError: no key remains after dropping ``$type``.
        UnrecognizedDumpKeyError: the single remaining key is not reserved.
    """
    if not is_dump(dump):
        raise NotADumpError(f"Expected a tagged dump, got {type(dump).__name__}")

    fields = {key: value for key, value in dump.items() if key != TYPE_KEY}
    if not fields:
        raise EmptyDumpError("Tagged dump has no value key", type=dump.get(TYPE_KEY))
    if len(fields) > 1:
        return ClassifiedDump(DumpShape.COMPOSITE, fields)

    (key,) = fields
    shape = _SINGLE_KEY_SHAPES.get(key) if isinstance(key, str) else None
    if shape is None:
        raise UnrecognizedDumpKeyError(f"Invalid key in tagged dump: {key!r}", key=str(key))
    return ClassifiedDump(shape, fields)


# --- Builders ---


def scalar_dump(value: Any, type_name: str | None = None) -> dict[str, Any]:
    """Wrap a primitive as a scalar dump."""
    return _tagged(type_name, VALUE_KEY, value)


def list_dump(items: Sequence[Dump], type_name: str | None = None) -> dict[str, Any]:
    """Wrap nested dumps as a list-like dump."""
    return _tagged(type_name, ITEMS_KEY, list(items))


def record_dump(
    pairs: Sequence[tuple[Dump, Dump]], type_name: str | None = None
) -> dict[str, Any]:
    """Flatten ``(key, value)`` dump pairs into a record-like dump."""
    entries: list[Dump] = []
    for key, value in pairs:
        entries.extend((key, value))
    return _tagged(type_name, ENTRIES_KEY, entries)


def _tagged(type_name: str | None, key: str, value: Any) -> dict[str, Any]:
    dump: dict[str, Any] = {}
    if type_name is not None:
        dump[TYPE_KEY] = type_name
    dump[key] = value
    return dump
