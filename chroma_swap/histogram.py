"""Counts the colors of an image in a coarse 3-D bucket grid."""

import logging
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from chroma_swap.buffers import ImageLike, as_pixel_array
from chroma_swap.config import DEFAULT_CONFIG, QuantizationConfig
from chroma_swap.errors import UnsupportedFormatError

log = logging.getLogger(__name__)

Cell = Tuple[int, int, int]


@dataclass
class ColorHistogram:
    """
    Pixel counts per (red, green, blue) bucket.

    Attributes:
        counts: Integer array of shape (grid_size, grid_size, grid_size).
        config: The quantization the counts were made with.
    """

    counts: np.ndarray
    config: QuantizationConfig = DEFAULT_CONFIG

    def __post_init__(self):
        size = self.config.grid_size
        if self.counts.shape != (size, size, size):
            raise UnsupportedFormatError(
                f"histogram shape {self.counts.shape} does not match grid size {size}"
            )

    def __getitem__(self, cell: Cell) -> int:
        return int(self.counts[cell])

    def total(self) -> int:
        """Number of pixels counted."""
        return int(self.counts.sum())


def scan_region(pixels: np.ndarray, config: QuantizationConfig) -> np.ndarray:
    """
    Get the part of an image that the histogram and the substituter look at.

    Args:
        pixels: The image pixels.
        config: The quantization settings.

    Returns:
        A view on the whole image, or on all but its last row and column when
        the reference scan is requested.
    """
    if config.skip_last_row_and_column:
        return pixels[:-1, :-1]
    return pixels


def bucket_indices(pixels: np.ndarray, config: QuantizationConfig) -> np.ndarray:
    """Get the bucket index of every channel of every pixel."""
    indices = pixels.astype(np.intp) // config.bucket_width
    # 256 is not always a multiple of the grid size, keep the top values in the last bucket
    return np.minimum(indices, config.grid_size - 1)


def build_histogram(
    image: ImageLike, config: QuantizationConfig = DEFAULT_CONFIG
) -> ColorHistogram:
    """
    Build the color histogram of an image.

    Cell (i, j, k) counts the pixels whose red value is in [i*W, (i+1)*W), green in
    [j*W, (j+1)*W) and blue in [k*W, (k+1)*W), W being the bucket width.

    Args:
        image: The image to count the colors of.
        config: The quantization settings.

    Returns:
        The histogram, its total being the number of scanned pixels.

    Raises:
        EmptyImageError: If the image has no rows or no columns.
        UnsupportedFormatError: If the image is not a 3-channel 8-bit image.
    """
    pixels = scan_region(as_pixel_array(image), config)
    size = config.grid_size

    indices = bucket_indices(pixels, config).reshape(-1, 3)
    flat = (indices[:, 0] * size + indices[:, 1]) * size + indices[:, 2]
    counts = np.bincount(flat, minlength=config.cell_count).reshape(size, size, size)

    log.debug("Counted %d pixels in %d buckets", flat.size, config.cell_count)
    return ColorHistogram(counts=counts, config=config)
