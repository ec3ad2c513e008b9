"""
Threshold matrices and the ordered-dithering pass used by ditherpack.

A ThresholdMatrix is a small (or image-sized) grid of byte thresholds that
tiles toroidally over the image. The DitherEngine compares every luma sample
against the threshold at the same coordinate and emits one bit per pixel:
white when the luma is strictly greater, black otherwise.
"""

import base64
import io
import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

import numpy as np
from PIL import Image, UnidentifiedImageError

from bitmap_codec import Bitmap
from blue_noise_data import BLUE_NOISE_PNG_B64, BLUE_NOISE_SIZE
from ditherpack_errors import BlueNoiseAssetError, InvalidMethodParameter
from utils import ensure_luma_array

__all__ = [
    'DEFAULT_BAYER_POWER',
    'MAX_BAYER_POWER',
    'DitherMethod',
    'ThresholdMatrix',
    'ThresholdMatrixGenerator',
    'DitherEngine',
]

logger = logging.getLogger(__name__)

DEFAULT_BAYER_POWER = 3

# A power-p matrix holds 4**p cells; past 8 (256x256) memory grows with no new byte levels.
MAX_BAYER_POWER = 8


# -------------------- Enumerations --------------------

class DitherMethod(Enum):
    BAYER = "bayer"
    BLUE_NOISE = "blue_noise"
    WHITE_NOISE = "white_noise"

    @classmethod
    def parse(cls, value: Union["DitherMethod", str]) -> "DitherMethod":
        """
        Resolve a method from an enum member or a name such as "blue-noise".

        Raises:
            InvalidMethodParameter: if the name matches no method
        """
        if isinstance(value, cls):
            return value
        name = str(value).strip().lower().replace('-', '_')
        try:
            return cls(name)
        except ValueError as exc:
            valid = ", ".join(m.value for m in cls)
            raise InvalidMethodParameter(
                "select dither method",
                f"unknown method {value!r} (expected one of: {valid})",
                exc,
            ) from exc


# -------------------- Threshold Matrix --------------------

@dataclass(frozen=True, eq=False)
class ThresholdMatrix:
    """
    Row-major grid of byte thresholds that wraps around in both axes.

    dimensions is (width, height); matrix holds width*height uint8 values
    and is read-only once constructed.
    """
    dimensions: Tuple[int, int]
    matrix: np.ndarray

    def __post_init__(self):
        width, height = (int(v) for v in self.dimensions)
        if width <= 0 or height <= 0:
            raise InvalidMethodParameter(
                "build threshold matrix",
                f"dimensions must be positive, got {width}x{height}",
            )
        matrix = np.array(self.matrix, dtype=np.uint8).reshape(-1)
        if matrix.size != width * height:
            raise InvalidMethodParameter(
                "build threshold matrix",
                f"expected {width * height} thresholds, got {matrix.size}",
            )
        matrix.setflags(write=False)
        object.__setattr__(self, 'dimensions', (width, height))
        object.__setattr__(self, 'matrix', matrix)

    @property
    def width(self) -> int:
        return self.dimensions[0]

    @property
    def height(self) -> int:
        return self.dimensions[1]

    def look_up(self, x: int, y: int) -> int:
        """Threshold at (x, y), with both coordinates wrapped."""
        width, height = self.dimensions
        return int(self.matrix[(y % height) * width + (x % width)])

    def as_array(self) -> np.ndarray:
        """The matrix as a (height, width) view."""
        return self.matrix.reshape(self.height, self.width)

    def tile(self, width: int, height: int, y_offset: int = 0) -> np.ndarray:
        """
        Tile the matrix over a (height, width) region whose first row is
        image row y_offset. Element [r, c] equals look_up(c, y_offset + r).
        """
        rows = np.arange(y_offset, y_offset + height) % self.height
        cols = np.arange(width) % self.width
        return self.as_array()[np.ix_(rows, cols)]


# -------------------- Matrix Generation --------------------

def _decode_blue_noise_asset() -> ThresholdMatrix:
    try:
        raw = base64.b64decode(BLUE_NOISE_PNG_B64, validate=True)
        with Image.open(io.BytesIO(raw)) as img:
            img.load()
            luma = np.array(img.convert('L'), dtype=np.uint8)
    except (ValueError, OSError, UnidentifiedImageError) as exc:
        raise BlueNoiseAssetError(f"embedded blue-noise tile is unreadable: {exc}") from exc

    height, width = luma.shape
    if (width, height) != BLUE_NOISE_SIZE:
        raise BlueNoiseAssetError(
            f"embedded blue-noise tile is {width}x{height}, expected "
            f"{BLUE_NOISE_SIZE[0]}x{BLUE_NOISE_SIZE[1]}"
        )
    return ThresholdMatrix((width, height), luma)


class ThresholdMatrixGenerator:
    """
    Builds threshold matrices for each DitherMethod.
    The decoded blue-noise tile is cached for the life of the process.
    """

    _cache = {}
    _cache_lock = threading.Lock()

    @staticmethod
    def bayer(power: int = DEFAULT_BAYER_POWER) -> ThresholdMatrix:
        """
        Recursive Bayer matrix of size 2**power, built by interleaving the
        bit-reversed bits of (x XOR y) and y. Index v in [0, n*n) is scaled
        to a byte as v * 255 // (n*n): (0, 0) is always 0 and the largest
        threshold is at most 254. Byte scaling merges levels once n*n > 255,
        so power 4 yields 255 distinct thresholds, not 256.
        """
        if power < 1 or power > MAX_BAYER_POWER:
            raise InvalidMethodParameter(
                "build bayer matrix",
                f"power must be between 1 and {MAX_BAYER_POWER}, got {power}",
            )
        power = int(power)
        n = 1 << power
        ys, xs = np.indices((n, n), dtype=np.int64)
        xc = xs ^ ys
        yc = ys

        v = np.zeros((n, n), dtype=np.int64)
        for p in range(power - 1, -1, -1):
            bit_idx = 2 * (power - 1 - p)
            v |= ((yc >> p) & 1) << bit_idx
            v |= ((xc >> p) & 1) << (bit_idx + 1)

        thresholds = (v * 255) // (n * n)
        return ThresholdMatrix((n, n), thresholds.astype(np.uint8))

    @classmethod
    def blue_noise(cls) -> ThresholdMatrix:
        """The bundled 128x128 blue-noise tile."""
        with cls._cache_lock:
            matrix = cls._cache.get(DitherMethod.BLUE_NOISE)
            if matrix is None:
                matrix = _decode_blue_noise_asset()
                cls._cache[DitherMethod.BLUE_NOISE] = matrix
        return matrix

    @staticmethod
    def white_noise(width: int, height: int,
                    rng: Optional[np.random.Generator] = None) -> ThresholdMatrix:
        """
        Image-sized matrix of independent uniform thresholds in [0, 254].
        255 is never drawn so a fully white pixel always stays white.
        """
        if width <= 0 or height <= 0:
            raise InvalidMethodParameter(
                "build white-noise matrix",
                f"dimensions must be positive, got {width}x{height}",
            )
        if rng is None:
            rng = np.random.default_rng()
        values = rng.integers(0, 255, size=width * height, dtype=np.uint8)
        return ThresholdMatrix((width, height), values)

    @classmethod
    def build(cls, method: Union[DitherMethod, str], dimensions: Tuple[int, int],
              bayer_power: int = DEFAULT_BAYER_POWER,
              rng: Optional[np.random.Generator] = None) -> ThresholdMatrix:
        """
        Build the matrix for `method`. `dimensions` is the (width, height) of
        the image being dithered; only white noise depends on it.
        """
        method = DitherMethod.parse(method)
        if method == DitherMethod.BAYER:
            matrix = cls.bayer(bayer_power)
        elif method == DitherMethod.BLUE_NOISE:
            matrix = cls.blue_noise()
        elif method == DitherMethod.WHITE_NOISE:
            matrix = cls.white_noise(dimensions[0], dimensions[1], rng=rng)
        else:
            raise InvalidMethodParameter("select dither method", f"unsupported method {method!r}")
        logger.debug("Threshold matrix: %s %dx%d", method.value, matrix.width, matrix.height)
        return matrix


# -------------------- Dither Engine --------------------

class DitherEngine:
    """
    Maps a grayscale raster to a Bitmap against a threshold matrix.

    With workers > 1 the raster is split into horizontal bands that are
    thresholded on a thread pool; bands are joined in row order so the bit
    sequence is identical to the single-threaded pass.
    """

    def __init__(self, workers: int = 1, min_band_rows: int = 64):
        if workers < 1:
            raise ValueError(f"workers must be >= 1, got {workers}")
        self.workers = workers
        self.min_band_rows = max(1, min_band_rows)

    @staticmethod
    def _threshold_band(threshold_matrix: ThresholdMatrix, band: np.ndarray,
                        y_offset: int) -> np.ndarray:
        height, width = band.shape
        thresholds = threshold_matrix.tile(width, height, y_offset=y_offset)
        return (band > thresholds).reshape(-1)

    def run(self, threshold_matrix: ThresholdMatrix, raster) -> Bitmap:
        """
        Dither `raster` (a PIL image or a 2-D uint8 array). The raster is
        never modified.
        """
        luma = ensure_luma_array(raster)
        height, width = luma.shape

        workers = min(self.workers, max(1, height // self.min_band_rows))
        if workers <= 1:
            bits = self._threshold_band(threshold_matrix, luma, 0)
        else:
            step = (height + workers - 1) // workers
            with ThreadPoolExecutor(max_workers=workers) as ex:
                futs = [
                    ex.submit(self._threshold_band, threshold_matrix, luma[s:s + step], s)
                    for s in range(0, height, step)
                ]
                bits = np.concatenate([fu.result() for fu in futs])

        return Bitmap((width, height), bits)
