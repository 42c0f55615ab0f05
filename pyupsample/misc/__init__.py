"""
Miscellaneous Utilities for PyUpsample

Raster file helpers used by the command line interface and by workflows that
upsample images stored on disk.

Available Functions:
- load_raster: Read an image or .npy file into a raster
- save_raster: Write a raster to an image or .npy file
"""

from .raster_utils import load_raster, save_raster

# Export public API
__all__ = [
    "load_raster",
    "save_raster",
]
