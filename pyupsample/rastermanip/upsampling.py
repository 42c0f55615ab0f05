"""
Method dispatch for PyUpsample.

Selects between the bilinear and the six-tap (SOI) upsamplers by name. The two
are independent strategies; this module only routes the call.
"""

from .. import constants as cte
from .bilinear import bilinear_upsample
from .sixtap import sixtap_upsample

_UPSAMPLERS = {
    cte.METHOD_BILINEAR: bilinear_upsample,
    cte.METHOD_SIXTAP: sixtap_upsample,
}


def upsample(grid_data, magnitude: int, method: str = cte.DEFAULT_METHOD):
    """
    Upsample a raster with the named method.

    Args:
        grid_data: Input raster (numpy array or Taichi field)
        magnitude: Integer scale factor. Any value >= 1 for 'bilinear',
                   2 or 4 for 'sixtap'
        method: 'bilinear' or 'sixtap' (default: 'bilinear')

    Returns:
        numpy.ndarray: Upsampled raster with the input dtype and layout

    Example:
        big = upsample(image, 4, method="sixtap")
    """
    if method not in _UPSAMPLERS:
        raise ValueError("method must be 'bilinear' or 'sixtap'")
    return _UPSAMPLERS[method](grid_data, magnitude)


__all__ = ["upsample"]
