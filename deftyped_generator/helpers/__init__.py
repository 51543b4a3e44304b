"""Helper utilities for marker discovery and console output."""

from deftyped_generator.helpers.marker_locator import (
    locate_marker,
    read_marker,
)

__all__ = [
    "locate_marker",
    "read_marker",
]
