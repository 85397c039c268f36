"""Result envelope for the host-facing JSON operations.

Every JsonAddon call answers a ServiceResult. ``data`` holds the parsed
value or the JSON text, ``error`` holds a typed failure, and ``meta``
records how many characters went in or came out.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """A dumpjson failure: its stable code, message and detail fields."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one stringify, parse or fallback operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Operation name, such as ``"parse"`` or ``"stringify"``.
        data: ``json`` text for stringify; ``value`` and its host ``type``
            for the parse family.
        warnings: Set when a fallback value replaced unparseable input.
        error: The typed failure when ``ok`` is False.
        meta: ``input_length`` of parsed text or ``output_length`` of
            produced JSON, in characters.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
