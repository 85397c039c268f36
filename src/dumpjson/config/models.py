"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, dumpjson.toml only contains
overrides. A missing file means every default applies.
"""

from __future__ import annotations

from pydantic import BaseModel

# --- dumpjson.toml sections ---


class SerializerConfig(BaseModel):
    """[serializer] section."""

    model_config = {"frozen": True}

    ensure_ascii: bool = False


class DeserializerConfig(BaseModel):
    """[deserializer] section."""

    model_config = {"frozen": True}

    trace_tree: bool = False
