"""
PyUpsample: Taichi-accelerated integer upsampling of 2D rasters.

Two interchangeable upsamplers over NumPy rasters of shape (ny, nx) or
(ny, nx, nc):

- rastermanip.bilinear_upsample: bilinear blending, any magnitude >= 1
- rastermanip.sixtap_upsample: the H.264 six-tap half-pel filter (SOI) with
  quarter-pel averaging, magnitude 2 or 4

Usage:
    import taichi as ti
    import pyupsample as pu

    ti.init(arch=ti.cpu)
    big = pu.rastermanip.sixtap_upsample(image, 4)
"""

__version__ = "0.0.1"

from . import constants
from . import misc
from . import rastermanip
from .exceptions import InvalidInputError, InvalidMagnitudeError, UpsampleError
from .rastermanip import bilinear_upsample, extend_border, sixtap_upsample, upsample

__all__ = [
    "__version__",
    "constants",
    "misc",
    "rastermanip",
    "UpsampleError",
    "InvalidInputError",
    "InvalidMagnitudeError",
    "bilinear_upsample",
    "sixtap_upsample",
    "extend_border",
    "upsample",
]
