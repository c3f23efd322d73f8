import cv2
import numpy as np
from PIL import Image


def edge_preview(
    image: Image.Image,
    kernel_size: int = 7,
    sigma: float = 2.0,
    low_threshold: int = 20,
    high_threshold: int = 60,
) -> Image.Image:
    """
    Get a Canny edge map of the mirrored image.

    The image is flipped horizontally, converted to grayscale, smoothed with a
    gaussian blur and passed through the Canny detector, whose hysteresis keeps
    gradients above high_threshold and the ones above low_threshold connected to them.

    Args:
        image: The image to outline.
        kernel_size: Size of the gaussian kernel, odd and positive.
        sigma: Standard deviation of the gaussian blur.
        low_threshold: Lower hysteresis threshold.
        high_threshold: Upper hysteresis threshold.

    Returns:
        A grayscale ("L") image with the same size as the input, edges at 255 and
        everything else at 0.

    Raises:
        ValueError: If the kernel size is not odd and positive, sigma is negative or
            the thresholds are negative or out of order.
    """
    if kernel_size <= 0 or kernel_size % 2 == 0:
        raise ValueError(f"kernel_size must be odd and positive, got {kernel_size}")
    if sigma < 0:
        raise ValueError("sigma must not be negative")
    if low_threshold < 0 or high_threshold < low_threshold:
        raise ValueError("thresholds must satisfy 0 <= low_threshold <= high_threshold")

    rgb = np.array(image.convert("RGB"), dtype=np.uint8)
    gray = cv2.cvtColor(cv2.flip(rgb, 1), cv2.COLOR_RGB2GRAY)
    gray = cv2.GaussianBlur(gray, (kernel_size, kernel_size), sigma)
    edges = cv2.Canny(gray, low_threshold, high_threshold)
    return Image.fromarray(edges, "L")
