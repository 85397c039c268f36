"""Typed failures raised by the serializer, deserializer, and dump producer.

Every error carries a stable ``code`` that the service layer copies into
:class:`~dumpjson.services.result.ServiceError`.
"""

from __future__ import annotations

from typing import Any, ClassVar


class DumpJsonError(Exception):
    """Base for every failure raised by dumpjson."""

    code: ClassVar[str] = "DUMPJSON_ERROR"

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.detail = detail


# --- Serializer ---


class InvalidDumpError(DumpJsonError):
    """The tagged dump does not have one of the recognised shapes."""

    code = "INVALID_DUMP"


class EmptyDumpError(InvalidDumpError):
    code = "EMPTY_DUMP"


class UnrecognizedDumpKeyError(InvalidDumpError):
    code = "UNRECOGNIZED_DUMP_KEY"


class KeyNotStringError(InvalidDumpError):
    code = "KEY_NOT_STRING"


class OddEntriesError(InvalidDumpError):
    code = "ODD_ENTRIES"


class NotADumpError(InvalidDumpError):
    code = "NOT_A_DUMP"


class UnencodableValueError(DumpJsonError):
    """The JSON codec has no literal for a raw value (NaN, arbitrary objects)."""

    code = "UNENCODABLE_VALUE"


class NotSerializableError(DumpJsonError):
    """A host value has no tagged dump representation."""

    code = "NOT_SERIALIZABLE"


# --- Deserializer ---


class NullInputError(DumpJsonError):
    code = "NULL_INPUT"


EmptyInputError = NullInputError


class MalformedJsonError(DumpJsonError):
    code = "MALFORMED_JSON"


class UnconvertibleValueError(DumpJsonError):
    """Stage B met a value outside the JSON value tree. Should be unreachable."""

    code = "UNCONVERTIBLE_VALUE"
