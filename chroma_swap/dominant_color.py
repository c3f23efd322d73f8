"""Finds the most common color of a histogram."""

import logging
from typing import NamedTuple

import numpy as np

from chroma_swap.config import QuantizationConfig
from chroma_swap.histogram import ColorHistogram

log = logging.getLogger(__name__)


class RGB(NamedTuple):
    red: int
    green: int
    blue: int


def bucket_center(index: int, config: QuantizationConfig) -> int:
    """Get the channel value in the middle of a bucket."""
    return index * config.bucket_width + config.bucket_width // 2


def find_dominant_color(histogram: ColorHistogram) -> RGB:
    """
    Find the color of the most populated histogram cell.

    Cells are compared red bucket first, then green, then blue, and the first
    cell reaching the highest count wins. An empty histogram gives the first cell.

    Args:
        histogram: The histogram to search.

    Returns:
        The center color of the winning cell.
    """
    # argmax walks the C-ordered array red-major and keeps the first maximum
    flat_index = int(np.argmax(histogram.counts))
    cell = np.unravel_index(flat_index, histogram.counts.shape)

    color = RGB(*(bucket_center(int(index), histogram.config) for index in cell))
    log.debug(
        "Dominant bucket %s holds %d pixels, color %s",
        tuple(int(i) for i in cell),
        histogram.counts[cell],
        color,
    )
    return color
