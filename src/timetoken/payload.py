"""Payload encoding and decoding.

Wire format: ``"<timestamp>,<token>"``, both fields base-10 ASCII digits,
one comma, no whitespace or sign.
"""

from .types import Payload, PayloadFormatError, PAYLOAD_DELIMITER


def encode_payload(payload: Payload) -> str:
    """
    Encode a payload to its text form.

    Args:
        payload: Payload to encode

    Returns:
        Text such as ``"1700000000,20976"``

    Raises:
        PayloadFormatError: If either field is negative
    """
    if payload.timestamp < 0 or payload.token < 0:
        raise PayloadFormatError(f"Payload fields must not be negative: {payload}")
    return f"{payload.timestamp:d}{PAYLOAD_DELIMITER}{payload.token:d}"


def decode_payload(text: str) -> Payload:
    """
    Decode payload text.

    Args:
        text: Decrypted payload text

    Returns:
        Decoded Payload

    Raises:
        PayloadFormatError: If the text does not hold exactly two unsigned integers
    """
    fields = text.split(PAYLOAD_DELIMITER)
    if len(fields) != 2:
        raise PayloadFormatError(f"Expected 2 fields, got {len(fields)}")

    for field in fields:
        # isdigit() alone accepts non-ASCII digits like "٣"
        if not field.isascii() or not field.isdigit():
            raise PayloadFormatError(f"Non-numeric payload field: {field!r}")

    return Payload(timestamp=int(fields[0]), token=int(fields[1]))
