"""
Utility functions for ditherpack: image loading, raster coercion and
small formatting helpers shared by the library and the CLI.
"""

import os
from typing import Union

import numpy as np
from PIL import Image, ImageOps

__all__ = [
    'IMAGE_EXTENSIONS',
    'validate_image_file',
    'load_grayscale_image',
    'ensure_luma_array',
    'format_size',
]

IMAGE_EXTENSIONS = {'.png', '.jpg', '.jpeg', '.gif', '.bmp', '.tiff', '.webp'}


def validate_image_file(filepath: str) -> bool:
    """
    Check if file is a valid image file.

    Args:
        filepath: Path to image file

    Returns:
        True if the extension is a known image type and the file exists
    """
    ext = os.path.splitext(filepath)[1].lower()
    return ext in IMAGE_EXTENSIONS and os.path.isfile(filepath)


def load_grayscale_image(filepath: str) -> Image.Image:
    """
    Open an image, apply its EXIF orientation and convert it to mode "L".

    Raises:
        OSError / UnidentifiedImageError: if the file cannot be decoded
    """
    with Image.open(filepath) as img:
        img = ImageOps.exif_transpose(img)
        return img.convert('L')


def ensure_luma_array(raster: Union[Image.Image, np.ndarray]) -> np.ndarray:
    """
    Return a (height, width) uint8 luma array for a PIL image or 2-D array.
    Images in other modes are converted to "L"; arrays are not copied.
    """
    if isinstance(raster, Image.Image):
        if raster.mode != 'L':
            raster = raster.convert('L')
        return np.asarray(raster, dtype=np.uint8)

    arr = np.asarray(raster)
    if arr.dtype != np.uint8 or arr.ndim != 2:
        raise TypeError(f"expected uint8 (H,W) raster, got {arr.dtype} {arr.shape}")
    return arr


def format_size(num_bytes: int) -> str:
    """Human-friendly byte count: '512 B', '3.2 KB', '1.4 MB'."""
    if num_bytes < 1024:
        return f"{num_bytes} B"
    if num_bytes < 1024 * 1024:
        return f"{num_bytes / 1024:.1f} KB"
    return f"{num_bytes / (1024 * 1024):.1f} MB"
