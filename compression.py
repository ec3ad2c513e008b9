"""
Zstandard wrapper for packed bitmap frames.
"""

import logging
from typing import BinaryIO

import zstandard

from ditherpack_errors import CompressionError, DecompressionError, InvalidMethodParameter

__all__ = [
    'DEFAULT_COMPRESSION_LEVEL',
    'MIN_COMPRESSION_LEVEL',
    'MAX_COMPRESSION_LEVEL',
    'compress',
    'decompress',
    'compress_to',
    'decompress_from',
]

logger = logging.getLogger(__name__)

DEFAULT_COMPRESSION_LEVEL = 19
MIN_COMPRESSION_LEVEL = 1
MAX_COMPRESSION_LEVEL = 22


def _check_level(level: int) -> int:
    if not MIN_COMPRESSION_LEVEL <= level <= MAX_COMPRESSION_LEVEL:
        raise InvalidMethodParameter(
            "compress",
            f"level must be between {MIN_COMPRESSION_LEVEL} and "
            f"{MAX_COMPRESSION_LEVEL}, got {level}",
        )
    return int(level)


def compress(data: bytes, level: int = DEFAULT_COMPRESSION_LEVEL) -> bytes:
    """
    Compress `data` into a single zstd frame that records its content size.

    Raises:
        CompressionError: if the compressor fails
    """
    cctx = zstandard.ZstdCompressor(level=_check_level(level), write_content_size=True)
    try:
        out = cctx.compress(bytes(data))
    except zstandard.ZstdError as exc:
        raise CompressionError("compress", str(exc), exc) from exc
    logger.debug("Compressed %d -> %d bytes (level %d)", len(data), len(out), level)
    return out


def decompress(data: bytes, max_output_size: int = 0) -> bytes:
    """
    Inverse of compress().

    max_output_size, when non-zero, rejects frames that would expand beyond
    that many bytes.

    Raises:
        DecompressionError: corrupt, truncated or oversized input, or
            trailing bytes after the frame
    """
    data = bytes(data)
    if max_output_size:
        try:
            declared = zstandard.frame_content_size(data)
        except zstandard.ZstdError as exc:
            raise DecompressionError("decompress", str(exc), exc) from exc
        if declared > max_output_size:
            raise DecompressionError(
                "decompress",
                f"frame declares {declared} bytes, above the {max_output_size} byte ceiling",
            )

    dobj = zstandard.ZstdDecompressor().decompressobj()
    try:
        out = dobj.decompress(data)
    except zstandard.ZstdError as exc:
        raise DecompressionError("decompress", str(exc), exc) from exc

    if not dobj.eof:
        raise DecompressionError("decompress", "truncated zstd frame")
    if dobj.unused_data:
        raise DecompressionError(
            "decompress", f"{len(dobj.unused_data)} trailing bytes after zstd frame")
    if max_output_size and len(out) > max_output_size:
        raise DecompressionError(
            "decompress", f"output exceeds the {max_output_size} byte ceiling")
    return out


def compress_to(data: bytes, writer: BinaryIO,
                level: int = DEFAULT_COMPRESSION_LEVEL) -> int:
    """
    Compress `data` and write it to `writer`. Returns bytes written.

    Raises:
        CompressionError: on compressor or sink failure
    """
    out = compress(data, level)
    try:
        writer.write(out)
    except OSError as exc:
        raise CompressionError("write compressed stream", str(exc), exc) from exc
    return len(out)


def decompress_from(reader: BinaryIO, max_output_size: int = 0) -> bytes:
    try:
        data = reader.read()
    except OSError as exc:
        raise DecompressionError("read compressed stream", str(exc), exc) from exc
    return decompress(data, max_output_size=max_output_size)
