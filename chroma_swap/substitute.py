"""Replaces the pixels close to a color with the pixels of another image."""

import logging
from typing import Tuple

import numpy as np

from chroma_swap.buffers import as_pixel_array
from chroma_swap.config import DEFAULT_CONFIG, QuantizationConfig
from chroma_swap.errors import UnsupportedFormatError
from chroma_swap.histogram import scan_region

log = logging.getLogger(__name__)


def color_match_mask(
    pixels: np.ndarray,
    color: Tuple[int, int, int],
    config: QuantizationConfig = DEFAULT_CONFIG,
) -> np.ndarray:
    """
    Get which pixels are within the match threshold of a color.

    Every channel is compared on its own: a pixel matches when each of its
    channels is at most `config.match_threshold` away from the color's.

    Args:
        pixels: An (height, width, 3) array of pixels.
        color: The color to compare against.
        config: The quantization settings.

    Returns:
        A boolean array of shape (height, width).
    """
    distance = np.abs(pixels.astype(np.int16) - np.array(color, dtype=np.int16))
    return np.all(distance <= config.match_threshold, axis=2)


def tile_to(replacement: np.ndarray, height: int, width: int) -> np.ndarray:
    """
    Repeat an image so it covers a height x width area.

    Pixel (row, col) of the result is pixel (row % h, col % w) of the replacement.
    Larger replacements are cropped.

    Args:
        replacement: The image to repeat, with at least one row and one column.
        height: Number of rows to cover.
        width: Number of columns to cover.

    Returns:
        An (height, width, 3) array.
    """
    rows = np.arange(height) % replacement.shape[0]
    cols = np.arange(width) % replacement.shape[1]
    return replacement[rows[:, np.newaxis], cols[np.newaxis, :]]


def replace_dominant_color(
    target: np.ndarray,
    color: Tuple[int, int, int],
    replacement: np.ndarray,
    config: QuantizationConfig = DEFAULT_CONFIG,
) -> np.ndarray:
    """
    Replace the pixels of target close to color with the matching pixels of replacement.

    The target is modified in place. If it is larger than the replacement, the
    replacement repeats at (row % replacement rows, col % replacement columns).
    Running it again with the same color and replacement changes nothing: a copied
    pixel that still matches is overwritten with the same replacement pixel.

    Args:
        target: A writable (height, width, 3) uint8 array owned by the caller.
        color: The color to replace, usually the dominant color of target.
        replacement: The image to copy pixels from.
        config: The quantization settings.

    Returns:
        The target array.

    Raises:
        EmptyImageError: If target or replacement has no rows or no columns.
        UnsupportedFormatError: If target or replacement is not a 3-channel 8-bit
            image, or if target is not a writable uint8 numpy array.
    """
    if not isinstance(target, np.ndarray):
        raise UnsupportedFormatError(
            f"target must be a numpy array, got {type(target).__name__}"
        )
    if target.dtype != np.uint8:
        raise UnsupportedFormatError(f"target must be a uint8 array, got {target.dtype}")
    if not target.flags.writeable:
        raise UnsupportedFormatError("target is read-only, pass a writable copy")
    target = as_pixel_array(target, "target")
    replacement = as_pixel_array(replacement, "replacement")

    region = scan_region(target, config)
    height, width = region.shape[:2]
    mask = color_match_mask(region, color, config)
    region[mask] = tile_to(replacement, height, width)[mask]

    log.debug(
        "Replaced %d of %d pixels close to %s", int(mask.sum()), mask.size, tuple(color)
    )
    return target
