"""Raster manipulation module for PyUpsample.

Provides Taichi-accelerated upsampling of 2D multi-channel rasters by an
integer magnitude, with a bilinear interpolator and a six-tap (SOI) filter
borrowed from H.264 sub-pixel motion compensation, plus the border extension
the six-tap filter relies on. All functions accept NumPy arrays or Taichi
fields and return NumPy arrays with the input dtype.
"""

from .bilinear import bilinear_upsample, bilinear_kernel
from .border import extend_border, extend_border_kernel
from .sixtap import (
    sixtap_upsample,
    horizontal_half_pel_kernel,
    vertical_half_pel_kernel,
    center_half_pel_kernel,
    quadrant_kernel,
    quadrant_edges_kernel,
)
from .upsampling import upsample

__all__ = [
    "bilinear_upsample",
    "bilinear_kernel",
    "extend_border",
    "extend_border_kernel",
    "sixtap_upsample",
    "horizontal_half_pel_kernel",
    "vertical_half_pel_kernel",
    "center_half_pel_kernel",
    "quadrant_kernel",
    "quadrant_edges_kernel",
    "upsample",
]
