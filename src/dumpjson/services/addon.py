"""JsonAddon — the operations a scripting host exposes to scripts.

STRINGIFY, PARSE, PARSE-OR-ELSE, PARSE-OR-ELSE-GET and IS-PARSEABLE, each
returning a :class:`ServiceResult`. Typed failures become
``ServiceError`` payloads; the fallback operations never fail except
when a fallback supplier raises.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from dumpjson.domain.errors import DumpJsonError
from dumpjson.domain.values import host_type_name, to_dump
from dumpjson.infrastructure import codec
from dumpjson.services.base import BaseService
from dumpjson.services.deserializer import LoggingObserver, TreeObserver, deserialize
from dumpjson.services.fallback import is_parseable, parse_or_compute, parse_or_default
from dumpjson.services.result import ServiceResult
from dumpjson.services.serializer import Serializer

if TYPE_CHECKING:
    from dumpjson.config.settings import DumpJsonSettings
    from dumpjson.domain.dump import Dump


@dataclass(frozen=True)
class _Fallback:
    """Marks a value that came from the fallback path."""

    value: Any


def _input_meta(text: str | None) -> dict[str, Any] | None:
    return None if text is None else {"input_length": len(text)}


class JsonAddon(BaseService):
    """Host-facing JSON operations configured from settings."""

    def __init__(self, settings: DumpJsonSettings) -> None:
        super().__init__(settings)
        self._serializer = Serializer(ensure_ascii=settings.serializer.ensure_ascii)

    def _observer(self) -> TreeObserver | None:
        if self._settings.deserializer.trace_tree:
            return LoggingObserver()
        return None

    # --- STRINGIFY ---

    def stringify(self, value: Any) -> ServiceResult:
        """Serialize a host value via its tagged dump."""
        try:
            dump = to_dump(value)
        except DumpJsonError as exc:
            return self._failure("stringify", exc)
        return self.stringify_dump(dump)

    def stringify_dump(self, dump: Dump) -> ServiceResult:
        """Serialize a tagged dump produced by the host."""
        try:
            text = self._serializer.serialize(dump)
        except DumpJsonError as exc:
            return self._failure("stringify", exc)
        return ServiceResult(
            ok=True,
            op="stringify",
            data={"json": text},
            meta={"output_length": len(text)},
        )

    def stringify_document(self, document: str) -> ServiceResult:
        """Serialize a tagged dump given as the host's own JSON dump document."""
        try:
            dump = codec.decode_object(document.strip())
        except DumpJsonError as exc:
            return self._failure("stringify", exc)
        return self.stringify_dump(dump)

    # --- PARSE family ---

    def parse(self, text: str | None) -> ServiceResult:
        """Parse JSON text into a host value."""
        try:
            value = deserialize(text, self._observer())
        except DumpJsonError as exc:
            return self._failure("parse", exc)
        return ServiceResult(
            ok=True,
            op="parse",
            data={"value": value, "type": host_type_name(value)},
            meta=_input_meta(text),
        )

    def parse_or_else(self, text: str | None, fallback: Any) -> ServiceResult:
        """Parse JSON text, answering *fallback* on any failure."""
        outcome = parse_or_default(text, _Fallback(fallback), self._observer())
        return self._outcome("parse_or_else", outcome, text)

    def parse_or_else_get(self, text: str | None, supplier: Callable[[], Any]) -> ServiceResult:
        """Parse JSON text, answering ``supplier()`` on any failure.

        Errors raised by *supplier* propagate to the caller.
        """
        outcome = parse_or_compute(text, lambda: _Fallback(supplier()), self._observer())
        return self._outcome("parse_or_else_get", outcome, text)

    def is_parseable(self, text: str | None) -> ServiceResult:
        """Report whether JSON text parses."""
        return ServiceResult(
            ok=True,
            op="is_parseable",
            data={"parseable": is_parseable(text)},
            meta=_input_meta(text),
        )

    @staticmethod
    def _outcome(op: str, outcome: Any, text: str | None) -> ServiceResult:
        used = isinstance(outcome, _Fallback)
        value = outcome.value if used else outcome
        return ServiceResult(
            ok=True,
            op=op,
            data={"value": value, "type": host_type_name(value), "fallback_used": used},
            warnings=["Input did not parse; fallback value returned"] if used else [],
            meta=_input_meta(text),
        )
