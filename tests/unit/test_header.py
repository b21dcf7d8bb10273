"""Unit tests for type byte and length field helpers."""

from __future__ import annotations

import pytest

from tlvframe.codec.header import (
    ENCODER_WIDTHS,
    MAX_PAYLOAD_SIZE,
    header_size,
    length_width,
    pack_header,
    pack_length,
    split_type_byte,
    type_byte,
    unpack_length,
)


class TestLengthWidth:
    """Test the encoder's width selection."""

    @pytest.mark.parametrize(
        "size, width",
        [
            (0, 1),
            (1, 1),
            (255, 1),
            (256, 2),
            (2500, 2),
            (65535, 2),
            (65536, 4),
            ((1 << 24), 4),
            ((1 << 32) - 1, 4),
            (1 << 32, 8),
            (MAX_PAYLOAD_SIZE, 8),
        ],
    )
    def test_width_boundaries(self, size: int, width: int) -> None:
        """Test widths at every boundary."""
        assert length_width(size) == width

    def test_width_never_odd(self) -> None:
        """Test the encoder only picks 1, 2, 4 or 8."""
        for shift in range(64):
            assert length_width(1 << shift) in ENCODER_WIDTHS

    def test_negative_size(self) -> None:
        """Test error on negative size."""
        with pytest.raises(ValueError, match="non-negative"):
            length_width(-1)

    def test_size_over_64_bits(self) -> None:
        """Test error on size that does not fit in 64 bits."""
        with pytest.raises(ValueError, match="64 bits"):
            length_width(1 << 64)


class TestTypeByte:
    """Test type byte construction and parsing."""

    def test_type_byte_values(self) -> None:
        """Test type byte for each encoder width."""
        assert [type_byte(w) for w in (1, 2, 4, 8)] == [0xF1, 0xF2, 0xF4, 0xF8]

    def test_type_byte_rejects_bad_width(self) -> None:
        """Test width bounds checking."""
        with pytest.raises(ValueError, match="Length width must be"):
            type_byte(0)
        with pytest.raises(ValueError, match="Length width must be"):
            type_byte(9)

    def test_split_type_byte(self) -> None:
        """Test splitting into marker and width."""
        assert split_type_byte(0xF4) == (0xF0, 4)
        assert split_type_byte(0x02) == (0x00, 2)
        assert split_type_byte(0xAF) == (0xA0, 15)


class TestLengthField:
    """Test little-endian length packing."""

    def test_pack_length(self) -> None:
        """Test packing at various widths."""
        assert pack_length(2500, 2) == b"\xc4\x09"
        assert pack_length(65536, 4) == b"\x00\x00\x01\x00"
        assert pack_length(0, 1) == b"\x00"
        assert pack_length(1, 8) == b"\x01" + b"\x00" * 7

    def test_pack_length_overflow(self) -> None:
        """Test error when size does not fit the width."""
        with pytest.raises(ValueError, match="does not fit"):
            pack_length(256, 1)

    def test_unpack_length(self) -> None:
        """Test zero-extension of short fields."""
        assert unpack_length(b"\xc4\x09") == 2500
        assert unpack_length(b"\x00\x00\x01") == 65536
        assert unpack_length(b"") == 0
        assert unpack_length(b"\xff" * 8) == MAX_PAYLOAD_SIZE

    def test_unpack_length_too_long(self) -> None:
        """Test error on a field wider than 8 bytes."""
        with pytest.raises(ValueError, match="at most 8 bytes"):
            unpack_length(b"\x00" * 9)

    def test_pack_header(self) -> None:
        """Test full headers."""
        assert pack_header(2) == b"\xf1\x02"
        assert pack_header(2500) == b"\xf2\xc4\x09"
        assert pack_header(65536) == b"\xf4\x00\x00\x01\x00"
        assert pack_header(1 << 32) == b"\xf8\x00\x00\x00\x00\x01\x00\x00\x00"

    def test_header_size(self) -> None:
        """Test header size accounting."""
        assert header_size(0) == 2
        assert header_size(256) == 3
        assert header_size(65536) == 5
        assert header_size(1 << 32) == 9
