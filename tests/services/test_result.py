"""Tests for ServiceResult and ServiceError."""

import json

import pytest

from dumpjson.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="stringify", data={"json": "[]"})
        assert result.ok is True
        assert result.op == "stringify"
        assert result.data == {"json": "[]"}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="MALFORMED_JSON", message="bad")
        result = ServiceResult(ok=False, op="parse", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "MALFORMED_JSON"

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="parse", data={"value": {"a": [1]}, "type": "Lexicon"})
        parsed = json.loads(result.model_dump_json())
        assert parsed["data"]["value"] == {"a": [1]}
        assert parsed["data"]["type"] == "Lexicon"

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]


class TestServiceError:
    def test_default_detail(self) -> None:
        assert ServiceError(code="E", message="m").detail == {}
