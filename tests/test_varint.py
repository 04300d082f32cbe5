"""Unit tests for afm_pack.codec.varint.

Tests cover the three encoding widths, their boundaries, decoding at an
offset, truncated input and the 16-bit range limit.
"""

import pytest

from afm_pack.codec.varint import decode_varint, encode_varint, varint_size
from afm_pack.exceptions import EncodingRangeError, MalformedTableError


class TestEncodeVarint:
    """Tests for the escape-coded encoding."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0, b"\x01\x00\x00"),
            (1, b"\x02"),
            (65, b"\x42"),
            (253, b"\xfe"),
            (254, b"\x00\x00"),
            (300, b"\x00\x2e"),
            (509, b"\x00\xff"),
            (510, b"\x01\x01\xfe"),
            (0x20AC, b"\x01\x20\xac"),
            (65535, b"\x01\xff\xff"),
        ],
    )
    def test_encode_known_values(self, value: int, expected: bytes) -> None:
        """Values encode to the documented byte sequences."""
        assert encode_varint(value) == expected

    def test_single_byte_encoding_never_starts_with_escape(self) -> None:
        """Values 1..253 encode to one byte in 2..254."""
        for value in range(1, 254):
            encoded = encode_varint(value)
            assert len(encoded) == 1
            assert 2 <= encoded[0] <= 254

    def test_zero_does_not_collide_with_word_escape(self) -> None:
        """Zero decodes back to itself inside a run of values."""
        data = encode_varint(0) + encode_varint(65) + encode_varint(66)
        value, pos = decode_varint(data)
        assert value == 0
        value, pos = decode_varint(data, pos)
        assert value == 65
        assert decode_varint(data, pos) == (66, len(data))

    @pytest.mark.parametrize("value", [-1, 65536, 1 << 20])
    def test_out_of_range_raises(self, value: int) -> None:
        """Values outside 0..65535 raise EncodingRangeError."""
        with pytest.raises(EncodingRangeError) as exc_info:
            encode_varint(value)
        assert exc_info.value.value == value

    def test_varint_size_matches_encoding(self) -> None:
        """varint_size reports the encoded length at each boundary."""
        for value in (0, 1, 253, 254, 509, 510, 65535):
            assert varint_size(value) == len(encode_varint(value))


class TestDecodeVarint:
    """Tests for decoding and round-tripping."""

    def test_round_trip_full_range(self) -> None:
        """Every 16-bit value decodes back to itself in at most 3 bytes."""
        for value in range(65536):
            encoded = encode_varint(value)
            assert len(encoded) <= 3
            assert decode_varint(encoded) == (value, len(encoded))

    def test_decode_at_offset_returns_next_offset(self) -> None:
        """Consecutive values decode by chaining the returned offset."""
        data = b"\xff" + encode_varint(7) + encode_varint(400) + encode_varint(9000)
        value, pos = decode_varint(data, 1)
        assert value == 7
        value, pos = decode_varint(data, pos)
        assert value == 400
        value, pos = decode_varint(data, pos)
        assert value == 9000
        assert pos == len(data)

    def test_decode_accepts_long_form_for_small_values(self) -> None:
        """A three-byte encoding of a small value still decodes."""
        assert decode_varint(b"\x01\x00\x05") == (5, 3)

    @pytest.mark.parametrize("data", [b"", b"\x00", b"\x01", b"\x01\x20"])
    def test_truncated_input_raises(self, data: bytes) -> None:
        """Escapes without their payload raise MalformedTableError."""
        with pytest.raises(MalformedTableError):
            decode_varint(data)
