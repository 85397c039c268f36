"""Deserializer: JSON text to host value.

Stage A turns text into a JSON value tree, dispatching on the first
character: ``{`` object, ``[`` array, ``"`` string. Anything else is a
bare literal tried in this order: ``true``/``false``, 32-bit integer,
float, ``null``; unmatched text passes through as a string.

Stage B walks the tree into host values. ``null`` becomes ``""``,
integers outside the 32-bit range widen to float.

An optional :class:`TreeObserver` sees every object entry and array item
before it is converted. It never changes the result.
"""

from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal
from typing import Any, Protocol

import structlog

from dumpjson.domain.errors import NullInputError, UnconvertibleValueError
from dumpjson.domain.numbers import narrow, parse_float_literal, parse_int_literal
from dumpjson.domain.values import HostValue
from dumpjson.infrastructure import codec


class TreeObserver(Protocol):
    """Receives each visited node of the JSON value tree."""

    def on_entry(self, key: str, value: Any) -> None: ...

    def on_item(self, index: int, value: Any) -> None: ...


class LoggingObserver:
    """Log every visited node at debug level via structlog."""

    def __init__(self, logger_name: str = "dumpjson.tree") -> None:
        self._log = structlog.get_logger(logger_name)

    def on_entry(self, key: str, value: Any) -> None:
        self._log.debug("tree.entry", key=key, value=repr(value), type=type(value).__name__)

    def on_item(self, index: int, value: Any) -> None:
        self._log.debug("tree.item", index=index, value=repr(value), type=type(value).__name__)


class RecordingObserver:
    """Collect visits as ``(kind, key_or_index, value)`` tuples."""

    def __init__(self) -> None:
        self.visits: list[tuple[str, str | int, Any]] = []

    def on_entry(self, key: str, value: Any) -> None:
        self.visits.append(("entry", key, value))

    def on_item(self, index: int, value: Any) -> None:
        self.visits.append(("item", index, value))


# --- Stage A: text -> JSON value tree ---

_DECODERS: dict[str, Callable[[str], Any]] = {
    "{": codec.decode_object,
    "[": codec.decode_array,
    '"': codec.decode_string,
}

_LITERALS: dict[str, bool] = {"true": True, "false": False}


def parse_tree(text: str | None) -> Any:
    """Parse *text* into a JSON value tree (dict, list, str, int, float, bool, None).

    Raises:
        NullInputError: *text* is None.
        MalformedJsonError: a ``{``/``[``/``"`` document fails to decode.
    """
    if text is None:
        raise NullInputError("The provided JSON string is null")

    text = text.strip()
    if not text:
        return text

    decoder = _DECODERS.get(text[0])
    if decoder is not None:
        return decoder(text)

    if text in _LITERALS:
        return _LITERALS[text]
    integer = parse_int_literal(text)
    if integer is not None:
        return integer
    number = parse_float_literal(text)
    if number is not None:
        return number
    if text == "null":
        return None
    return text


# --- Stage B: JSON value tree -> host value ---


def to_host_value(node: Any, observer: TreeObserver | None = None) -> HostValue:
    """Convert a JSON value tree into a fresh host value.

    Raises:
        UnconvertibleValueError: *node* is not a JSON value.
    """
    if node is None:
        return ""
    if isinstance(node, dict):
        mapping: dict[str, HostValue] = {}
        for key, value in node.items():
            if observer is not None:
                observer.on_entry(key, value)
            mapping[key] = to_host_value(value, observer)
        return mapping
    if isinstance(node, list):
        sequence: list[HostValue] = []
        for index, item in enumerate(node):
            if observer is not None:
                observer.on_item(index, item)
            sequence.append(to_host_value(item, observer))
        return sequence
    if isinstance(node, str):
        return node
    # bool before int: JSON true must not become the integer 1
    if isinstance(node, bool):
        return node
    if isinstance(node, int):
        return narrow(node)
    if isinstance(node, float):
        return node
    if isinstance(node, Decimal):
        return float(node)
    raise UnconvertibleValueError(
        f"Value failed to deserialize: {node!r}",
        type=type(node).__name__,
    )


def deserialize(text: str | None, observer: TreeObserver | None = None) -> HostValue:
    """Parse JSON *text* into a host value.

    Empty or whitespace-only text yields ``""``.
    """
    return to_host_value(parse_tree(text), observer)
