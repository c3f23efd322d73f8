class ChromaSwapError(ValueError):
    """Base class for invalid input handed to the color swapping core."""


class EmptyImageError(ChromaSwapError):
    """Raised when an image has no rows or no columns."""


class UnsupportedFormatError(ChromaSwapError):
    """Raised when a buffer is not a 3-channel 8-bit image."""
