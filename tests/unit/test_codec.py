"""
test_codec.py - Unit tests for the wire encoding

Tests:
- encode / decode of each value type
- JSON encoder and dumps/loads helpers
- Error messages and debug logging for rejected payloads
"""

import json
import logging

import pytest

from signedmath import SignedDecimal, SignedInt, Decimal256, Uint256, ParseError, codec


class TestEncode:

    def test_values_encode_as_numeral_strings(self):
        assert codec.encode(SignedDecimal.from_str("-3.50")) == "-3.5"
        assert codec.encode(SignedDecimal.zero()) == "0.0"
        assert codec.encode(SignedInt.nan()) == "NaN"
        assert codec.encode(Uint256(7)) == "7"
        assert codec.encode(Decimal256.from_str("0.25")) == "0.25"

    def test_unsupported_type(self):
        with pytest.raises(TypeError):
            codec.encode(3.5)


class TestDecode:

    def test_signed_decimal(self):
        assert codec.decode_signed_decimal("-12.5") == SignedDecimal.from_str("-12.5")

    def test_signed_int(self):
        assert codec.decode_signed_int("-12") == SignedInt.from_str("-12")
        assert codec.decode_signed_int("NaN").is_nan()

    def test_magnitudes(self):
        assert codec.decode(Uint256, "12") == Uint256(12)
        assert codec.decode(Decimal256, "1.5") == Decimal256.from_str("1.5")

    def test_invalid_numeral_message(self):
        with pytest.raises(ParseError, match="Error parsing signed_decimal 'abc'"):
            codec.decode_signed_decimal("abc")

    @pytest.mark.parametrize("payload", ["1" * 5000, "-" + "1" * 5000, "1." + "1" * 5000])
    def test_oversized_payload_is_wrapped_and_logged(self, payload, caplog):
        with caplog.at_level(logging.DEBUG, logger="signedmath.codec"):
            with pytest.raises(ParseError, match="Error parsing signed_decimal"):
                codec.decode_signed_decimal(payload)
        assert "Rejected signed_decimal payload" in caplog.text

    def test_non_string_payload(self):
        with pytest.raises(ParseError, match="Expected string-encoded signed_int"):
            codec.decode_signed_int(12)

    def test_unknown_target_type(self):
        with pytest.raises(TypeError):
            codec.decode(float, "1.0")

    def test_rejection_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="signedmath.codec"):
            with pytest.raises(ParseError):
                codec.decode_signed_int("1.5")
        assert "Rejected signed_int payload" in caplog.text


class TestJson:

    def test_dumps_writes_strings(self):
        text = codec.dumps({
            "pnl": SignedDecimal.from_str("-3.5"),
            "shares": SignedInt.from_str("7"),
            "supply": Uint256(2),
        })
        assert text == '{"pnl": "-3.5", "shares": "7", "supply": "2"}'

    def test_encoder_with_json_module(self):
        text = json.dumps([SignedInt.from_str("-1")], cls=codec.SignedJSONEncoder)
        assert text == '["-1"]'

    def test_encoder_rejects_unknown_objects(self):
        with pytest.raises(TypeError):
            codec.dumps({"x": object()})

    def test_loads_decodes_named_fields(self):
        text = '{"pnl": "-3.5", "shares": "7", "memo": "hello"}'
        payload = codec.loads(text, {"pnl": SignedDecimal, "shares": SignedInt, "fee": SignedDecimal})
        assert payload["pnl"] == SignedDecimal.from_str("-3.5")
        assert payload["shares"] == SignedInt.from_str("7")
        assert payload["memo"] == "hello"
        assert "fee" not in payload

    def test_loads_rejects_numbers(self):
        with pytest.raises(ParseError):
            codec.loads('{"pnl": -3.5}', {"pnl": SignedDecimal})

    def test_loads_requires_object(self):
        with pytest.raises(ValueError):
            codec.loads('["-1"]', {})
