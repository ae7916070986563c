"""
codec.py - Wire encoding for signed and unsigned values

The on-wire form of every value is its numeral string: "-12.5" for a
SignedDecimal, "-12" or "NaN" for a SignedInt, "12" for a Uint256. Nothing
else is ever emitted: no objects, no separate sign fields.

Usage:
    from signedmath import codec

    text = codec.dumps({"pnl": SignedDecimal.from_str("-3.5")})
    # '{"pnl": "-3.5"}'
    payload = codec.loads(text, {"pnl": SignedDecimal})
"""

from __future__ import annotations
import json
import logging
from typing import Any, Dict, Mapping, Type

from .core import ParseError
from .magnitude import Decimal256, Uint256
from .signed_decimal import SignedDecimal
from .signed_int import SignedInt


logger = logging.getLogger(__name__)

# Wire names used in error messages.
WIRE_NAMES = {
    SignedDecimal: "signed_decimal",
    SignedInt: "signed_int",
    Decimal256: "decimal256",
    Uint256: "uint256",
}

ENCODABLE_TYPES = tuple(WIRE_NAMES)


def encode(value) -> str:
    """Return the wire string of a signed or unsigned value."""
    if not isinstance(value, ENCODABLE_TYPES):
        raise TypeError(f"Cannot encode {type(value).__name__} as a numeral string")
    return str(value)


def decode(cls: Type, payload: Any):
    """
    Decode a wire string into an instance of cls.

    Raises:
        ParseError: If the payload is not a string or not a valid numeral.
        TypeError: If cls is not one of the encodable types.
    """
    if cls not in WIRE_NAMES:
        raise TypeError(f"Cannot decode into {cls.__name__}")
    wire_name = WIRE_NAMES[cls]
    if not isinstance(payload, str):
        logger.debug("Rejected %s payload of type %s", wire_name, type(payload).__name__)
        raise ParseError(
            f"Expected string-encoded {wire_name}, got {type(payload).__name__}"
        )
    try:
        return cls.from_str(payload)
    except ParseError as e:
        logger.debug("Rejected %s payload %r: %s", wire_name, payload, e)
        raise ParseError(f"Error parsing {wire_name} '{payload}': {e}") from e


def decode_signed_decimal(payload: Any) -> SignedDecimal:
    return decode(SignedDecimal, payload)


def decode_signed_int(payload: Any) -> SignedInt:
    return decode(SignedInt, payload)


class SignedJSONEncoder(json.JSONEncoder):
    """JSON encoder that writes signed and unsigned values as numeral strings."""

    def default(self, o):
        if isinstance(o, ENCODABLE_TYPES):
            return encode(o)
        return super().default(o)


def dumps(obj: Any, **kwargs) -> str:
    """json.dumps with SignedJSONEncoder and sorted keys for deterministic output."""
    kwargs.setdefault("sort_keys", True)
    return json.dumps(obj, cls=SignedJSONEncoder, **kwargs)


def loads(text: str, field_types: Mapping[str, Type]) -> Dict[str, Any]:
    """
    Parse a JSON object and decode the fields named in field_types.

    Fields not named in field_types are returned as plain JSON values.
    A field named in field_types but missing from the object is left absent.

    Raises:
        ParseError: If a named field holds an invalid numeral.
        ValueError: If the document is not a JSON object.
    """
    document = json.loads(text)
    if not isinstance(document, dict):
        raise ValueError(f"Expected a JSON object, got {type(document).__name__}")
    result = dict(document)
    for name, cls in field_types.items():
        if name in result:
            result[name] = decode(cls, result[name])
    return result
