"""
ditherpack: pack a grayscale image into a dithered, zstd-compressed 1-bit
frame, and unpack such a frame back into displayable pixels.

    data = pack(image, DitherMethod.BLUE_NOISE)
    buf = unpack(data)   # buf.pixels: uint32, 0xFFFFFFFF white, 0xFF000000 black

Pack runs: threshold matrix -> dither -> frame encode -> compress.
Unpack runs the mirror image. Failures propagate as DitherPackError
subclasses; nothing is retried and no partial result is returned.
"""

import logging
from dataclasses import dataclass
from typing import BinaryIO, Optional, Tuple, Union

import numpy as np
from PIL import Image

from bitmap_codec import Bitmap, BitmapCodec
from compression import (
    DEFAULT_COMPRESSION_LEVEL,
    compress,
    compress_to,
    decompress,
    decompress_from,
)
from ditherpack_errors import (
    BlueNoiseAssetError,
    CompressionError,
    DecodeError,
    DecompressionError,
    DitherPackError,
    EncodeError,
    InvalidBitmapError,
    InvalidMethodParameter,
)
from dithering_lib import (
    DEFAULT_BAYER_POWER,
    DitherEngine,
    DitherMethod,
    ThresholdMatrix,
    ThresholdMatrixGenerator,
)
from utils import ensure_luma_array

__version__ = "0.2.0"

__all__ = [
    '__version__',
    'WHITE_PIXEL',
    'BLACK_PIXEL',
    'PixelBuffer',
    'pack',
    'pack_to',
    'unpack',
    'unpack_from',
    'unpack_bitmap',
    'dither_to_frame',
    'expand_bitmap',
    # re-exports
    'Bitmap',
    'BitmapCodec',
    'DitherEngine',
    'DitherMethod',
    'ThresholdMatrix',
    'ThresholdMatrixGenerator',
    'DitherPackError',
    'InvalidMethodParameter',
    'InvalidBitmapError',
    'EncodeError',
    'DecodeError',
    'CompressionError',
    'DecompressionError',
    'BlueNoiseAssetError',
]

logger = logging.getLogger(__name__)

WHITE_PIXEL = 0xFFFFFFFF
BLACK_PIXEL = 0xFF000000


@dataclass(frozen=True, eq=False)
class PixelBuffer:
    """Unpacked image: one opaque black or white uint32 per pixel, row-major."""
    dimensions: Tuple[int, int]
    pixels: np.ndarray

    @property
    def width(self) -> int:
        return self.dimensions[0]

    @property
    def height(self) -> int:
        return self.dimensions[1]

    def __len__(self) -> int:
        return int(self.pixels.size)

    def to_image(self) -> Image.Image:
        """Render as an RGBA Pillow image."""
        white = (self.pixels == WHITE_PIXEL).reshape(self.height, self.width)
        rgba = np.empty((self.height, self.width, 4), dtype=np.uint8)
        rgba[..., :3] = np.where(white, 255, 0)[..., None]
        rgba[..., 3] = 255
        return Image.fromarray(rgba, mode='RGBA')


# -------------------- Pack --------------------

def dither_to_frame(image: Union[Image.Image, np.ndarray],
                    method: Union[DitherMethod, str] = DitherMethod.BAYER,
                    bayer_power: int = DEFAULT_BAYER_POWER,
                    workers: int = 1,
                    rng: Optional[np.random.Generator] = None) -> bytes:
    """Dither `image` and return the uncompressed frame."""
    method = DitherMethod.parse(method)
    raster = ensure_luma_array(image)
    height, width = raster.shape
    if width == 0 or height == 0:
        raise InvalidBitmapError("pack image", f"image has no pixels ({width}x{height})")

    matrix = ThresholdMatrixGenerator.build(
        method, (width, height), bayer_power=bayer_power, rng=rng)
    bitmap = DitherEngine(workers=workers).run(matrix, raster)
    frame = BitmapCodec.encode(bitmap)
    logger.debug("Dithered %dx%d with %s: %d white of %d",
                 width, height, method.value, bitmap.white_count(), len(bitmap))
    return frame


def pack(image: Union[Image.Image, np.ndarray],
         method: Union[DitherMethod, str] = DitherMethod.BAYER,
         bayer_power: int = DEFAULT_BAYER_POWER,
         compression_level: int = DEFAULT_COMPRESSION_LEVEL,
         workers: int = 1,
         rng: Optional[np.random.Generator] = None) -> bytes:
    """
    Dither `image` with `method` and return the compressed frame.

    Args:
        image: PIL image (any mode, converted to "L") or 2-D uint8 luma array
        method: dither method or its name
        bayer_power: Bayer matrix size exponent (8x8 for the default 3)
        compression_level: zstd level, 1-22
        workers: threads used for the dither pass
        rng: random generator for white noise
    """
    frame = dither_to_frame(image, method, bayer_power=bayer_power, workers=workers, rng=rng)
    return compress(frame, level=compression_level)


def pack_to(image: Union[Image.Image, np.ndarray],
            method: Union[DitherMethod, str],
            writer: BinaryIO,
            bayer_power: int = DEFAULT_BAYER_POWER,
            compression_level: int = DEFAULT_COMPRESSION_LEVEL,
            workers: int = 1,
            rng: Optional[np.random.Generator] = None) -> int:
    """
    pack() into a binary writer. Returns the number of bytes written.

    Raises:
        CompressionError: if writing to `writer` fails
    """
    frame = dither_to_frame(image, method, bayer_power=bayer_power, workers=workers, rng=rng)
    return compress_to(frame, writer, level=compression_level)


# -------------------- Unpack --------------------

def unpack_bitmap(data: bytes, max_output_size: int = 0) -> Bitmap:
    """Decompress and decode a packed frame without expanding it."""
    return BitmapCodec.decode(decompress(data, max_output_size=max_output_size))


def expand_bitmap(bitmap: Bitmap) -> PixelBuffer:
    pixels = np.where(bitmap.bits, np.uint32(WHITE_PIXEL), np.uint32(BLACK_PIXEL)).astype(np.uint32)
    return PixelBuffer(bitmap.dimensions, pixels)


def unpack(data: bytes, max_output_size: int = 0) -> PixelBuffer:
    """
    Restore the pixel buffer of a packed frame.

    Raises:
        DecodeError: corrupt, truncated or inconsistent input (including
            DecompressionError)
    """
    return expand_bitmap(unpack_bitmap(data, max_output_size=max_output_size))


def unpack_from(reader: BinaryIO, max_output_size: int = 0) -> PixelBuffer:
    frame = decompress_from(reader, max_output_size=max_output_size)
    return expand_bitmap(BitmapCodec.decode(frame))
