"""JSON codec: scalar encoding and shape-checked decoding.

Thin layer over :mod:`json` that fixes the text conventions the rest of
the package relies on:

- compact separators, no trailing whitespace
- RFC 8259 numbers only (``NaN`` / ``Infinity`` rejected both ways)
- object key order is decoder insertion order; duplicate keys are
  last-write-wins

Decode failures surface as :class:`MalformedJsonError`, encode failures
as :class:`UnencodableValueError`.
"""

from __future__ import annotations

import json
from typing import Any, NoReturn

from dumpjson.domain.errors import MalformedJsonError, UnencodableValueError

_SEPARATORS = (",", ":")


def _reject_constant(name: str) -> NoReturn:
    raise MalformedJsonError(f"Non-standard JSON constant: {name}", constant=name)


def encode(value: Any, *, ensure_ascii: bool = False) -> str:
    """Encode a JSON-native value as JSON text."""
    try:
        return json.dumps(
            value,
            ensure_ascii=ensure_ascii,
            allow_nan=False,
            separators=_SEPARATORS,
        )
    except (TypeError, ValueError) as exc:
        msg = f"Cannot encode {type(value).__name__} as JSON: {exc}"
        raise UnencodableValueError(msg, type=type(value).__name__) from exc


def encode_key(key: Any, *, ensure_ascii: bool = False) -> str:
    """Encode the natural text form of *key* as a JSON string literal."""
    return encode(str(key), ensure_ascii=ensure_ascii)


def _decode(text: str) -> Any:
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        msg = f"Malformed JSON at line {exc.lineno} column {exc.colno}: {exc.msg}"
        raise MalformedJsonError(msg, line=exc.lineno, column=exc.colno) from exc
    except ValueError as exc:
        raise MalformedJsonError(f"Malformed JSON: {exc}") from exc


def _decode_as(text: str, expected: type, label: str) -> Any:
    value = _decode(text)
    if not isinstance(value, expected):
        raise MalformedJsonError(f"Expected a JSON {label}, got {type(value).__name__}")
    return value


def decode_object(text: str) -> dict[str, Any]:
    """Decode text that must hold a single JSON object."""
    return _decode_as(text, dict, "object")


def decode_array(text: str) -> list[Any]:
    """Decode text that must hold a single JSON array."""
    return _decode_as(text, list, "array")


def decode_string(text: str) -> str:
    """Decode text that must hold a single JSON string literal."""
    return _decode_as(text, str, "string")


def is_string_literal(text: str) -> bool:
    """Whether *text* (codec output) is a JSON string literal."""
    return text.startswith('"')
