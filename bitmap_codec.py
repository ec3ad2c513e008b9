"""
The Bitmap value and its binary framing.

Frame layout (all integers little-endian):

    offset  size  field
    0       4     magic b"DPAK"
    4       1     format version (1)
    5       4     width  (u32)
    9       4     height (u32)
    13      n     width*height bits, row-major, packed LSB-first,
                  n = ceil(width*height / 8); padding bits are zero

Frames written by other implementations are not expected to be compatible.
"""

import struct
from dataclasses import dataclass
from typing import Tuple

import numpy as np
from PIL import Image

from ditherpack_errors import DecodeError, EncodeError, InvalidBitmapError

__all__ = [
    'MAGIC',
    'FORMAT_VERSION',
    'HEADER_SIZE',
    'Bitmap',
    'BitmapCodec',
]

MAGIC = b"DPAK"
FORMAT_VERSION = 1
U32_MAX = 0xFFFFFFFF

_HEADER = struct.Struct('<4sBII')
HEADER_SIZE = _HEADER.size


@dataclass(frozen=True, eq=False)
class Bitmap:
    """
    One bit per pixel: True renders white, False black.

    bits[y * width + x] is pixel (x, y). The bit count always equals
    width * height; construction fails otherwise.
    """
    dimensions: Tuple[int, int]
    bits: np.ndarray

    def __post_init__(self):
        width, height = (int(v) for v in self.dimensions)
        if width <= 0 or height <= 0:
            raise InvalidBitmapError(
                "build bitmap", f"dimensions must be positive, got {width}x{height}")
        bits = np.array(self.bits, dtype=bool).reshape(-1)
        if bits.size != width * height:
            raise InvalidBitmapError(
                "build bitmap",
                f"{width}x{height} needs {width * height} bits, got {bits.size}",
            )
        bits.setflags(write=False)
        object.__setattr__(self, 'dimensions', (width, height))
        object.__setattr__(self, 'bits', bits)

    @property
    def width(self) -> int:
        return self.dimensions[0]

    @property
    def height(self) -> int:
        return self.dimensions[1]

    def __len__(self) -> int:
        return int(self.bits.size)

    def __eq__(self, other):
        if not isinstance(other, Bitmap):
            return NotImplemented
        return self.dimensions == other.dimensions and np.array_equal(self.bits, other.bits)

    __hash__ = None

    def white_count(self) -> int:
        return int(np.count_nonzero(self.bits))

    def to_image(self) -> Image.Image:
        """Render as a Pillow mode "1" image."""
        grid = self.bits.reshape(self.height, self.width).astype(np.uint8) * 255
        return Image.fromarray(grid, mode='L').convert('1', dither=Image.Dither.NONE)


class BitmapCodec:
    """Serializes a Bitmap to a self-describing byte frame and back."""

    @staticmethod
    def packed_size(width: int, height: int) -> int:
        """Total frame size in bytes for a width x height bitmap."""
        return HEADER_SIZE + (width * height + 7) // 8

    @staticmethod
    def encode(bitmap: Bitmap) -> bytes:
        width, height = bitmap.dimensions
        if width > U32_MAX or height > U32_MAX:
            raise EncodeError(
                "encode bitmap", f"dimensions {width}x{height} do not fit in u32")
        if bitmap.bits.size != width * height:
            raise EncodeError(
                "encode bitmap",
                f"bit count {bitmap.bits.size} does not match {width}x{height}",
            )
        header = _HEADER.pack(MAGIC, FORMAT_VERSION, width, height)
        return header + np.packbits(bitmap.bits, bitorder='little').tobytes()

    @staticmethod
    def decode(data: bytes) -> Bitmap:
        """
        Parse a frame produced by encode().

        Raises:
            DecodeError: truncated or oversized frame, bad magic, unknown
                version, or dimensions inconsistent with the payload
        """
        data = bytes(data)
        if len(data) < HEADER_SIZE:
            raise DecodeError(
                "decode bitmap",
                f"truncated header: {len(data)} of {HEADER_SIZE} bytes",
            )

        magic, version, width, height = _HEADER.unpack_from(data, 0)
        if magic != MAGIC:
            raise DecodeError("decode bitmap", f"bad magic {magic!r}")
        if version != FORMAT_VERSION:
            raise DecodeError("decode bitmap", f"unsupported format version {version}")
        if width == 0 or height == 0:
            raise DecodeError("decode bitmap", f"empty dimensions {width}x{height}")

        bit_count = width * height
        expected = (bit_count + 7) // 8
        available = len(data) - HEADER_SIZE
        if available < expected:
            raise DecodeError(
                "decode bitmap",
                f"{width}x{height} needs {bit_count} bits ({expected} bytes), "
                f"only {available} bytes present",
            )
        if available > expected:
            raise DecodeError(
                "decode bitmap",
                f"{available - expected} unexpected trailing bytes",
            )

        payload = np.frombuffer(data, dtype=np.uint8, count=expected, offset=HEADER_SIZE)
        bits = np.unpackbits(payload, count=bit_count, bitorder='little').astype(bool)
        try:
            return Bitmap((width, height), bits)
        except InvalidBitmapError as exc:
            raise DecodeError("decode bitmap", exc.message, exc) from exc
