"""Tests for the stringify CLI command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from dumpjson.cli import cli

LEXICON_DUMP = {
    "$type": "Lexicon",
    "Entries": [
        {"$type": "StringValue", "value": "name"},
        {"$type": "StringValue", "value": "Rocket"},
        {"$type": "StringValue", "value": "stages"},
        {
            "$type": "ListValue",
            "Items": [
                {"$type": "ScalarIntValue", "value": 1},
                {"$type": "ScalarDoubleValue", "value": 2.5},
            ],
        },
    ],
}


@pytest.mark.usefixtures("_isolated_cwd")
class TestStringifyCommand:
    def test_inline_dump(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["stringify", json.dumps(LEXICON_DUMP)])
        assert result.exit_code == 0
        assert result.output.strip() == '{"name":"Rocket","stages":[1,2.5]}'

    def test_file_input(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "pid.dump.json"
        path.write_text(json.dumps({"$type": "PIDLoop", "Kp": 0.5, "Ki": 0.0}))
        result = cli_runner.invoke(cli, ["stringify", "--file", str(path)])
        assert result.exit_code == 0
        assert result.output.strip() == '{"Kp":0.5,"Ki":0.0}'

    def test_stdin_input(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["stringify"], input='{"Items": []}\n')
        assert result.exit_code == 0
        assert result.output.strip() == "[]"

    def test_json_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "stringify", '{"value": "hi"}'])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["op"] == "stringify"
        assert data["data"]["json"] == '"hi"'

    def test_invalid_dump_fails(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "stringify", '{"$type": "X"}'])
        assert result.exit_code == 1
        assert result.stdout == ""
        data = json.loads(result.stderr)
        assert data["error"]["code"] == "EMPTY_DUMP"

    def test_non_string_key_fails(self, cli_runner: CliRunner) -> None:
        dump = {"Entries": [{"value": 5}, {"value": 1}]}
        result = cli_runner.invoke(cli, ["stringify", json.dumps(dump)])
        assert result.exit_code == 1
        assert "ERROR" in result.stderr

    def test_malformed_document_fails(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "stringify", "{oops"])
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["code"] == "MALFORMED_JSON"

    def test_text_and_file_conflict(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "d.json"
        path.write_text("{}")
        result = cli_runner.invoke(cli, ["stringify", "{}", "--file", str(path)])
        assert result.exit_code == 2
