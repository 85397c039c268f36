"""Tests for the format_result dispatcher and OutputSettings."""

import json

from dumpjson.output.formatters import OutputSettings, format_result
from dumpjson.services.result import ServiceError, ServiceResult


def _ok(op: str = "parse", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "parse", msg: str = "fail") -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code="MALFORMED_JSON", message=msg, detail={"line": 1}),
    )


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestFormatResultJSON:
    def test_json_mode_returns_valid_json(self) -> None:
        output = format_result(
            _ok(value={"a": 1}, type="Lexicon"), settings=OutputSettings(json_output=True)
        )
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "parse"
        assert data["data"]["value"] == {"a": 1}

    def test_json_mode_error(self) -> None:
        data = json.loads(format_result(_err(msg="Bad"), settings=OutputSettings(json_output=True)))
        assert data["ok"] is False
        assert data["error"]["message"] == "Bad"
        assert data["error"]["code"] == "MALFORMED_JSON"


class TestFormatResultHuman:
    def test_parse_fields(self) -> None:
        output = format_result(_ok(value={"name": "Rocket"}, type="Lexicon"))
        assert output.splitlines()[0].startswith("OK")
        assert "parse" in output
        assert '  value: {"name":"Rocket"}' in output
        assert "  type: Lexicon" in output

    def test_string_value_is_quoted(self) -> None:
        output = format_result(_ok(value="42", type="StringValue"))
        assert '  value: "42"' in output

    def test_stringify_prints_bare_json(self) -> None:
        assert format_result(_ok("stringify", json='{"k":1}')) == '{"k":1}'

    def test_error_line(self) -> None:
        output = format_result(_err(msg="Bad input"))
        assert output.startswith("ERROR")
        assert "Bad input" in output
        assert "MALFORMED_JSON" not in output

    def test_error_verbose_shows_code_and_detail(self) -> None:
        output = format_result(_err(), settings=OutputSettings(verbose=True))
        assert "  code: MALFORMED_JSON" in output
        assert "  line: 1" in output

    def test_no_trailing_newline(self) -> None:
        assert not format_result(_ok(value=1, type="ScalarIntValue")).endswith("\n")


class TestFormatResultQuiet:
    def test_parse_value(self) -> None:
        output = format_result(
            _ok(value=[1, "a"], type="ListValue"), settings=OutputSettings(quiet=True)
        )
        assert output == '[1,"a"]'

    def test_parseable(self) -> None:
        quiet = OutputSettings(quiet=True)
        assert format_result(_ok("is_parseable", parseable=True), settings=quiet) == "true"
        assert format_result(_ok("is_parseable", parseable=False), settings=quiet) == "false"
