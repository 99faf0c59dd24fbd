"""Tests for payload encoding."""

import pytest
from timetoken.payload import encode_payload, decode_payload
from timetoken.types import Payload, PayloadFormatError
from .test_vectors import PAYLOAD_TEXT, MALFORMED_PAYLOADS


class TestPayloadEncoding:
    """Test the "<timestamp>,<token>" wire format."""

    def test_encode(self) -> None:
        """Fields are joined by one comma with no whitespace."""
        assert encode_payload(Payload(timestamp=1_700_000_000, token=2402)) == PAYLOAD_TEXT

    def test_decode(self) -> None:
        """Text decodes back to the same fields."""
        assert decode_payload(PAYLOAD_TEXT) == Payload(timestamp=1_700_000_000, token=2402)

    def test_zero_fields(self) -> None:
        """Zero is a valid value for both fields."""
        assert encode_payload(Payload(0, 0)) == "0,0"
        assert decode_payload("0,0") == Payload(0, 0)

    def test_encode_rejects_negative(self) -> None:
        """Negative fields cannot be encoded."""
        with pytest.raises(PayloadFormatError):
            encode_payload(Payload(timestamp=-1, token=0))

    @pytest.mark.parametrize("name,text", MALFORMED_PAYLOADS.items())
    def test_decode_rejects_malformed(self, name: str, text: str) -> None:
        """Anything but two unsigned decimal integers is refused."""
        with pytest.raises(PayloadFormatError):
            decode_payload(text)
