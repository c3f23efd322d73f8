"""Quantization parameters shared by the histogram, locator and substituter."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class QuantizationConfig:
    """
    Describes how color space is split into buckets and how close a pixel must be to match.

    Attributes:
        grid_size: Number of buckets per channel.
        channel_levels: Number of distinct values per channel (256 for 8-bit images).
        threshold: Per-channel match distance. Defaults to the bucket width.
        skip_last_row_and_column: Stop scanning one row and one column short of the
            image edge, like the original overlay tool did.
    """

    grid_size: int = 4
    channel_levels: int = 256
    threshold: Optional[int] = None
    skip_last_row_and_column: bool = False

    def __post_init__(self):
        if self.channel_levels < 1:
            raise ValueError("channel_levels must be positive")
        if not 1 <= self.grid_size <= self.channel_levels:
            raise ValueError(
                f"grid_size must be between 1 and {self.channel_levels}, got {self.grid_size}"
            )
        if self.threshold is not None and self.threshold < 0:
            raise ValueError("threshold must not be negative")

    @property
    def bucket_width(self) -> int:
        """Width of one bucket along a channel."""
        return self.channel_levels // self.grid_size

    @property
    def match_threshold(self) -> int:
        """Per-channel distance under which a pixel matches the dominant color."""
        if self.threshold is None:
            return self.bucket_width
        return self.threshold

    @property
    def cell_count(self) -> int:
        return self.grid_size**3


DEFAULT_CONFIG = QuantizationConfig()
