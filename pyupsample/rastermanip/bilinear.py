"""
Bilinear upsampling for PyUpsample.

Each source cell spanned by four known samples a=(y, x), b=(y, x+1),
c=(y+1, x), d=(y+1, x+1) is filled with magnitude x magnitude samples blended
linearly along both axes. On the last column only the vertical blend between
a and c exists, on the last row only the horizontal blend between a and b, and
the bottom-right sample is copied.
"""

import numpy as np
import taichi as ti

from .. import constants as cte
from .raster import check_magnitude, from_work_array, to_work_array, upsampled_shape


@ti.func
def _lerp(p, q, t):
    return p + t * (q - p)


@ti.kernel
def bilinear_kernel(
    source: ti.types.ndarray(),
    target: ti.types.ndarray(),
    ny: ti.i32,
    nx: ti.i32,
    nc: ti.i32,
    magnitude: ti.i32,
):
    """
    Upsample a raster by bilinear interpolation.

    Args:
        source: Source raster (ny, nx, nc)
        target: Float64 output ((ny-1)*magnitude+1, (nx-1)*magnitude+1, nc)
        ny: Number of rows in the source
        nx: Number of columns in the source
        nc: Number of channels
        magnitude: Integer scale factor (>= 1)
    """
    for y, x in ti.ndrange(ny, nx):
        has_right = x + 1 < nx
        has_below = y + 1 < ny

        # Cells on the last row/column only own their first sub-row/sub-column
        sub_j_end = ti.select(has_below, magnitude, 1)
        sub_i_end = ti.select(has_right, magnitude, 1)

        for sub_j in range(sub_j_end):
            h = ti.cast(sub_j, ti.f64) / magnitude
            for sub_i in range(sub_i_end):
                w = ti.cast(sub_i, ti.f64) / magnitude
                for c in range(nc):
                    a = ti.cast(source[y, x, c], ti.f64)
                    pix = a
                    if has_right and has_below:
                        b = ti.cast(source[y, x + 1, c], ti.f64)
                        cc = ti.cast(source[y + 1, x, c], ti.f64)
                        d = ti.cast(source[y + 1, x + 1, c], ti.f64)
                        pix = _lerp(_lerp(a, b, w), _lerp(cc, d, w), h)
                    elif has_below:
                        cc = ti.cast(source[y + 1, x, c], ti.f64)
                        pix = _lerp(a, cc, h)
                    elif has_right:
                        b = ti.cast(source[y, x + 1, c], ti.f64)
                        pix = _lerp(a, b, w)
                    target[y * magnitude + sub_j, x * magnitude + sub_i, c] = pix


def bilinear_upsample(grid_data, magnitude: int):
    """
    Upsample a raster by an integer magnitude with bilinear interpolation.

    Output shape is ((ny-1)*magnitude+1, (nx-1)*magnitude+1): every source
    sample (y, x) lands unchanged on (y*magnitude, x*magnitude) and nothing is
    extrapolated beyond the last row and column.

    Args:
        grid_data: Input raster (numpy array or Taichi field) of shape (ny, nx)
                   or (ny, nx, nc)
        magnitude: Integer scale factor, at least 1

    Returns:
        numpy.ndarray: Upsampled raster with the input dtype and layout.
        Integral rasters are rounded to the nearest integer.

    Raises:
        InvalidInputError: If grid_data is absent or not a raster
        InvalidMagnitudeError: If magnitude is not an integer >= 1

    Example:
        # Triple a single channel raster
        big = bilinear_upsample(elevation, 3)
    """
    work, info = to_work_array(grid_data)
    magnitude = check_magnitude(magnitude, minimum=cte.BILINEAR_MIN_MAGNITUDE)

    ny, nx, nc = work.shape
    out_ny, out_nx = upsampled_shape(ny, nx, magnitude)
    target = np.zeros((out_ny, out_nx, nc), dtype=np.float64)

    bilinear_kernel(work, target, ny, nx, nc, magnitude)

    return from_work_array(target, info)


__all__ = ["bilinear_upsample", "bilinear_kernel"]
