"""Host values and the host value -> tagged dump producer.

Host values are plain Python data: ``str``, ``int`` (always inside the
32-bit native range), ``float``, ``bool``, insertion-ordered ``dict`` and
``list``. JSON ``null`` has no host counterpart.

Two opaque host structures, :class:`PIDLoop` and :class:`RangeValue`,
dump as multi-key composite dumps rather than as records.
"""

from __future__ import annotations

import sys
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from dumpjson.domain.dump import TYPE_KEY, list_dump, record_dump, scalar_dump
from dumpjson.domain.errors import NotSerializableError
from dumpjson.domain.numbers import fits_narrow

type HostValue = str | int | float | bool | dict[str, HostValue] | list[HostValue]

STRING_TYPE = "StringValue"
INT_TYPE = "ScalarIntValue"
DOUBLE_TYPE = "ScalarDoubleValue"
BOOLEAN_TYPE = "BooleanValue"
LIST_TYPE = "ListValue"
LEXICON_TYPE = "Lexicon"


@dataclass(frozen=True)
class PIDLoop:
    """Control-loop state: gains, setpoint, and output clamp."""

    kp: float = 1.0
    ki: float = 0.0
    kd: float = 0.0
    setpoint: float = 0.0
    min_output: float = -sys.float_info.max
    max_output: float = sys.float_info.max
    extra_unwind: bool = False

    def dump(self) -> dict[str, Any]:
        return {
            TYPE_KEY: "PIDLoop",
            "Kp": self.kp,
            "Ki": self.ki,
            "Kd": self.kd,
            "Setpoint": self.setpoint,
            "MinOutput": self.min_output,
            "MaxOutput": self.max_output,
            "ExtraUnwind": self.extra_unwind,
        }


@dataclass(frozen=True)
class RangeValue:
    """Numeric range ``[start, stop)`` advancing by ``step``."""

    start: int = 0
    stop: int = 0
    step: int = 1

    def dump(self) -> dict[str, Any]:
        return {TYPE_KEY: "RangeValue", "start": self.start, "stop": self.stop, "step": self.step}


def to_dump(value: Any) -> dict[str, Any]:
    """Reflect a host value into its tagged dump.

    Raises:
        NotSerializableError: *value* has no dump representation.
    """
    # bool before int: a bool is an int to Python but never to the host
    if isinstance(value, bool):
        return scalar_dump(value, BOOLEAN_TYPE)
    if isinstance(value, int):
        return scalar_dump(value, INT_TYPE if fits_narrow(value) else DOUBLE_TYPE)
    if isinstance(value, float):
        return scalar_dump(value, DOUBLE_TYPE)
    if isinstance(value, str):
        return scalar_dump(value, STRING_TYPE)
    if isinstance(value, (PIDLoop, RangeValue)):
        return value.dump()
    if isinstance(value, (list, tuple)):
        return list_dump([to_dump(item) for item in value], LIST_TYPE)
    if isinstance(value, Mapping):
        return record_dump([(to_dump(k), to_dump(v)) for k, v in value.items()], LEXICON_TYPE)
    raise NotSerializableError(
        f"This type is not serializable: {type(value).__name__}",
        type=type(value).__name__,
    )


def host_type_name(value: Any) -> str:
    """Name the host type a deserialized value stands for."""
    if isinstance(value, bool):
        return BOOLEAN_TYPE
    if isinstance(value, int):
        return INT_TYPE
    if isinstance(value, float):
        return DOUBLE_TYPE
    if isinstance(value, str):
        return STRING_TYPE
    if isinstance(value, list):
        return LIST_TYPE
    if isinstance(value, dict):
        return LEXICON_TYPE
    return type(value).__name__
