"""Serializer: tagged dump to JSON text.

Walks a dump by shape:

- scalar      -> codec literal for the held primitive
- list-like   -> ``[e1,e2,...]`` of recursively serialized items
- record-like -> ``{k1:v1,...}`` from alternating key/value items;
  every key must serialize to a JSON string literal
- composite   -> JSON object of every non-``$type`` field; nested dumps
  recurse, other fields go through the codec as-is

Output order is input order. Nothing is sorted.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from dumpjson.domain.dump import ClassifiedDump, Dump, DumpShape, as_sequence, classify, is_dump
from dumpjson.domain.errors import KeyNotStringError, OddEntriesError
from dumpjson.infrastructure import codec

logger = logging.getLogger(__name__)


class Serializer:
    """Stateless dump -> JSON text writer.

    Args:
        ensure_ascii: Escape every non-ASCII character in string literals.
    """

    def __init__(self, *, ensure_ascii: bool = False) -> None:
        self._ensure_ascii = ensure_ascii

    def serialize(self, dump: Dump) -> str:
        """Serialize *dump* to compact JSON text.

        Raises:
            InvalidDumpError: *dump* or a nested dump has no recognised shape.
            UnencodableValueError: a raw value has no JSON literal.
        """
        classified = classify(dump)
        shape = classified.shape
        if shape is DumpShape.COMPOSITE:
            return self._write_composite(classified)
        if shape is DumpShape.SCALAR:
            return codec.encode(classified.payload, ensure_ascii=self._ensure_ascii)
        items = as_sequence(classified.payload)
        if shape is DumpShape.LIST_LIKE:
            return "[]" if items is None else self._write_items(items)
        return "{}" if items is None else self._write_entries(items)

    def _write_items(self, items: Sequence[Any]) -> str:
        return "[" + ",".join(self.serialize(item) for item in items) + "]"

    def _write_entries(self, entries: Sequence[Any]) -> str:
        if len(entries) % 2:
            raise OddEntriesError(
                f"Record entries must pair up, got {len(entries)} items",
                length=len(entries),
            )
        members: list[str] = []
        for i in range(0, len(entries), 2):
            key = self.serialize(entries[i])
            if not codec.is_string_literal(key):
                raise KeyNotStringError(f"Key of record is not a string: {key}", key=key)
            members.append(f"{key}:{self.serialize(entries[i + 1])}")
        return "{" + ",".join(members) + "}"

    def _write_composite(self, classified: ClassifiedDump) -> str:
        members: list[str] = []
        for key, value in classified.fields.items():
            if is_dump(value):
                text = self.serialize(value)
            else:
                text = codec.encode(value, ensure_ascii=self._ensure_ascii)
            members.append(f"{codec.encode_key(key, ensure_ascii=self._ensure_ascii)}:{text}")
        logger.debug("Serialized composite dump with %d fields", len(members))
        return "{" + ",".join(members) + "}"


_default = Serializer()


def serialize(dump: Dump) -> str:
    """Serialize *dump* with default settings."""
    return _default.serialize(dump)
