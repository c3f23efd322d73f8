"""Conversion between Pillow images and the pixel arrays used by the core."""

from typing import Union

import numpy as np
from PIL import Image

from chroma_swap.errors import EmptyImageError, UnsupportedFormatError

ImageLike = Union[Image.Image, np.ndarray]


def as_pixel_array(image: ImageLike, name: str = "image") -> np.ndarray:
    """
    Get an (height, width, 3) uint8 array of RGB pixels from an image.

    Pillow images are converted to RGB first. Arrays are validated but never
    converted from other channel layouts.

    Args:
        image: A Pillow image or a numpy array of RGB pixels.
        name: Name of the argument, used in error messages.

    Returns:
        The pixels as a uint8 array. Arrays that already have the right dtype
        are returned as is, without copying.

    Raises:
        EmptyImageError: If the image has no rows or no columns.
        UnsupportedFormatError: If the buffer is not a 3-channel 8-bit image.
    """
    if isinstance(image, Image.Image):
        if image.size[0] == 0 or image.size[1] == 0:
            raise EmptyImageError(f"{name} is empty ({image.size[0]}x{image.size[1]})")
        return np.array(image.convert("RGB"), dtype=np.uint8)

    if not isinstance(image, np.ndarray):
        raise UnsupportedFormatError(
            f"{name} must be a PIL image or a numpy array, got {type(image).__name__}"
        )
    if image.ndim != 3 or image.shape[2] != 3:
        raise UnsupportedFormatError(
            f"{name} must have shape (height, width, 3), got {image.shape}"
        )
    if image.shape[0] == 0 or image.shape[1] == 0:
        raise EmptyImageError(f"{name} is empty ({image.shape[1]}x{image.shape[0]})")

    if image.dtype == np.uint8:
        return image
    if not np.issubdtype(image.dtype, np.integer):
        raise UnsupportedFormatError(f"{name} must hold integer channels, got {image.dtype}")
    if image.min() < 0 or image.max() > 255:
        raise UnsupportedFormatError(f"{name} has channel values outside [0, 255]")
    return image.astype(np.uint8)


def to_image(pixels: np.ndarray) -> Image.Image:
    """Wrap an RGB pixel array into a Pillow image."""
    return Image.fromarray(pixels, "RGB")
