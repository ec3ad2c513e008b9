"""
Error types raised by the ditherpack core.

Every recoverable failure is a DitherPackError carrying the operation that
failed and, when there is one, the underlying exception.
"""

from typing import Optional

__all__ = [
    'DitherPackError',
    'InvalidMethodParameter',
    'InvalidBitmapError',
    'EncodeError',
    'DecodeError',
    'CompressionError',
    'DecompressionError',
    'BlueNoiseAssetError',
]


class DitherPackError(Exception):
    """Base class for all recoverable ditherpack failures."""

    def __init__(self, operation: str, message: str,
                 cause: Optional[BaseException] = None):
        self.operation = operation
        self.message = message
        self.cause = cause
        super().__init__(f"{operation}: {message}")


class InvalidMethodParameter(DitherPackError, ValueError):
    """Raised before matrix generation for a bad method or parameter."""
    pass


class InvalidBitmapError(DitherPackError, ValueError):
    """Raised when a Bitmap would violate its size invariant."""
    pass


class EncodeError(DitherPackError):
    pass


class DecodeError(DitherPackError):
    """Raised for truncated, malformed or inconsistent packed bytes."""
    pass


class CompressionError(DitherPackError):
    pass


class DecompressionError(DecodeError):
    """Raised on corrupt or truncated compressed input."""
    pass


class BlueNoiseAssetError(RuntimeError):
    """
    The bundled blue-noise tile could not be decoded.

    Signals a broken install rather than bad input; not a DitherPackError.
    """
    pass
