import logging
from typing import Optional

from PIL import Image

from chroma_swap.buffers import ImageLike, as_pixel_array, to_image
from chroma_swap.config import DEFAULT_CONFIG, QuantizationConfig
from chroma_swap.dominant_color import find_dominant_color
from chroma_swap.histogram import build_histogram
from chroma_swap.substitute import replace_dominant_color

log = logging.getLogger(__name__)


def create_overlay(
    foreground: ImageLike,
    background: ImageLike,
    config: Optional[QuantizationConfig] = None,
) -> ImageLike:
    """
    Replace the most common color of foreground with the pixels of background.

    If the foreground is larger than the background, the background repeats at
    (row % background rows, col % background columns). Neither input is modified.

    Args:
        foreground: The image whose dominant color is keyed out.
        background: The image shown through the keyed out pixels.
        config: The quantization settings, defaults to a 4x4x4 grid.

    Returns:
        The composited image, with the size of the foreground. A Pillow image if
        the foreground is one, a numpy array otherwise.

    Raises:
        EmptyImageError: If either image has no rows or no columns.
        UnsupportedFormatError: If either image is not a 3-channel 8-bit image.
    """
    config = config or DEFAULT_CONFIG

    output = as_pixel_array(foreground, "foreground").copy()
    background_pixels = as_pixel_array(background, "background")

    histogram = build_histogram(output, config)
    color = find_dominant_color(histogram)
    log.info("Keying out %s from a %dx%d image", color, output.shape[1], output.shape[0])

    replace_dominant_color(output, color, background_pixels, config)

    if isinstance(foreground, Image.Image):
        return to_image(output)
    return output
