import struct

import numpy as np
import pytest

from bitmap_codec import FORMAT_VERSION, HEADER_SIZE, MAGIC, Bitmap, BitmapCodec
from ditherpack_errors import DecodeError, InvalidBitmapError


def _bitmap(width, height, seed=0):
    rng = np.random.default_rng(seed)
    return Bitmap((width, height), rng.integers(0, 2, size=width * height).astype(bool))


class TestBitmap:
    def test_size_invariant(self):
        with pytest.raises(InvalidBitmapError):
            Bitmap((2, 2), [True, False, True])

    def test_empty_dimensions(self):
        with pytest.raises(InvalidBitmapError):
            Bitmap((0, 3), [])

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            Bitmap((1, 1), [])

    def test_equality(self):
        a = Bitmap((2, 1), [True, False])
        assert a == Bitmap((2, 1), [True, False])
        assert a != Bitmap((1, 2), [True, False])
        assert a != Bitmap((2, 1), [False, True])

    def test_white_count_and_len(self):
        b = Bitmap((3, 2), [True, True, False, False, False, True])
        assert len(b) == 6
        assert b.white_count() == 3

    def test_to_image(self):
        b = Bitmap((2, 2), [True, False, False, True])
        img = b.to_image()
        assert img.mode == '1'
        assert img.size == (2, 2)
        assert img.getpixel((0, 0)) == 255
        assert img.getpixel((1, 0)) == 0
        assert img.getpixel((0, 1)) == 0


class TestBitmapCodec:
    @pytest.mark.parametrize("width,height", [(1, 1), (3, 3), (8, 1), (13, 7), (64, 64)])
    def test_round_trip(self, width, height):
        bitmap = _bitmap(width, height)
        frame = BitmapCodec.encode(bitmap)
        assert len(frame) == BitmapCodec.packed_size(width, height)
        assert BitmapCodec.decode(frame) == bitmap

    def test_header_layout(self):
        frame = BitmapCodec.encode(_bitmap(300, 2))
        assert frame[:4] == MAGIC
        assert frame[4] == FORMAT_VERSION
        assert struct.unpack('<II', frame[5:13]) == (300, 2)
        assert HEADER_SIZE == 13

    def test_bits_are_lsb_first(self):
        bits = [True] + [False] * 7 + [False, True]
        frame = BitmapCodec.encode(Bitmap((10, 1), bits))
        assert frame[HEADER_SIZE:] == bytes([0x01, 0x02])

    def test_padding_bits_are_zero(self):
        frame = BitmapCodec.encode(Bitmap((3, 3), [True] * 9))
        assert frame[HEADER_SIZE:] == bytes([0xFF, 0x01])

    def test_truncated_payload(self):
        frame = BitmapCodec.encode(_bitmap(13, 7))
        with pytest.raises(DecodeError):
            BitmapCodec.decode(frame[:-1])

    @pytest.mark.parametrize("length", [0, 4, HEADER_SIZE - 1])
    def test_truncated_header(self, length):
        frame = BitmapCodec.encode(_bitmap(4, 4))
        with pytest.raises(DecodeError):
            BitmapCodec.decode(frame[:length])

    def test_trailing_bytes(self):
        frame = BitmapCodec.encode(_bitmap(4, 4))
        with pytest.raises(DecodeError):
            BitmapCodec.decode(frame + b"\x00")

    def test_bad_magic(self):
        frame = BitmapCodec.encode(_bitmap(4, 4))
        with pytest.raises(DecodeError):
            BitmapCodec.decode(b"NOPE" + frame[4:])

    def test_bad_version(self):
        frame = BitmapCodec.encode(_bitmap(4, 4))
        with pytest.raises(DecodeError):
            BitmapCodec.decode(frame[:4] + bytes([FORMAT_VERSION + 1]) + frame[5:])

    def test_zero_dimensions(self):
        frame = struct.pack('<4sBII', MAGIC, FORMAT_VERSION, 0, 5)
        with pytest.raises(DecodeError):
            BitmapCodec.decode(frame)

    def test_declared_size_larger_than_payload(self):
        frame = struct.pack('<4sBII', MAGIC, FORMAT_VERSION, 1000, 1000) + b"\xff" * 10
        with pytest.raises(DecodeError):
            BitmapCodec.decode(frame)
