"""Tests for the JSON codec layer."""

import pytest

from dumpjson.domain.errors import MalformedJsonError, UnencodableValueError
from dumpjson.infrastructure import codec


class TestEncode:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("Rocket", '"Rocket"'),
            ('say "hi"\n', '"say \\"hi\\"\\n"'),
            (1, "1"),
            (1.0, "1.0"),
            (-2.5e-3, "-0.0025"),
            (True, "true"),
            (False, "false"),
            ([1, "a"], '[1,"a"]'),
            ({"a": 1}, '{"a":1}'),
        ],
    )
    def test_literals(self, value: object, expected: str) -> None:
        assert codec.encode(value) == expected

    def test_unicode_kept_by_default(self) -> None:
        assert codec.encode("Kerbin°") == '"Kerbin°"'

    def test_unicode_escaped_on_request(self) -> None:
        assert codec.encode("°", ensure_ascii=True) == '"\\u00b0"'

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), object()])
    def test_unencodable(self, value: object) -> None:
        with pytest.raises(UnencodableValueError):
            codec.encode(value)

    def test_encode_key_uses_text_form(self) -> None:
        assert codec.encode_key(7) == '"7"'


class TestDecode:
    def test_object_keeps_insertion_order(self) -> None:
        assert list(codec.decode_object('{"z":1,"a":2}')) == ["z", "a"]

    def test_duplicate_keys_last_write_wins(self) -> None:
        assert codec.decode_object('{"a":1,"a":2}') == {"a": 2}

    def test_array(self) -> None:
        assert codec.decode_array("[1, 2.5, null]") == [1, 2.5, None]

    def test_string(self) -> None:
        assert codec.decode_string('"a\\u00b0"') == "a°"

    @pytest.mark.parametrize("text", ['{"a":', "[1,,2]", '"open', '{"a":1} trailing'])
    def test_malformed(self, text: str) -> None:
        with pytest.raises(MalformedJsonError):
            codec.decode_object(text)

    def test_malformed_reports_position(self) -> None:
        with pytest.raises(MalformedJsonError) as info:
            codec.decode_array("[1,\n2,]")
        assert info.value.detail["line"] == 2

    def test_shape_mismatch(self) -> None:
        with pytest.raises(MalformedJsonError):
            codec.decode_object("[1]")

    def test_integer_past_digit_limit(self) -> None:
        with pytest.raises(MalformedJsonError):
            codec.decode_array("[" + "9" * 5000 + "]")

    @pytest.mark.parametrize("text", ["[NaN]", '{"a":Infinity}', "[-Infinity]"])
    def test_non_standard_constants(self, text: str) -> None:
        decode = codec.decode_array if text.startswith("[") else codec.decode_object
        with pytest.raises(MalformedJsonError):
            decode(text)


class TestIsStringLiteral:
    def test_detects_strings(self) -> None:
        assert codec.is_string_literal('"k"')
        assert not codec.is_string_literal("5")
        assert not codec.is_string_literal("[]")
