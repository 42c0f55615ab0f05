"""
Border extension for PyUpsample.

Adds a margin around a raster so that filters reading a fixed neighbourhood
have valid samples at every original position, including the edges. The
six-tap upsampler relies on the replicate mode: each added sample equals the
nearest edge sample.

Boundary modes:
- replicate: clamp the index to the raster (aaa|abcd|ddd)
- wrap: periodic continuation (bcd|abcd|abc)
- reflect: mirror without repeating the edge sample (dcb|abcd|cba)
"""

import numpy as np
import taichi as ti

from .. import constants as cte
from .raster import from_work_array, to_work_array


@ti.func
def _wrap_index(i: ti.i32, n: ti.i32) -> ti.i32:
    return i % n


@ti.func
def _reflect_index(i: ti.i32, n: ti.i32) -> ti.i32:
    x = 0
    if n > 1:
        period = 2 * (n - 1)
        x = i % period
        if x >= n:
            x = period - x
    return x


@ti.func
def _resolve_index(i: ti.i32, n: ti.i32, mode: ti.i32) -> ti.i32:
    res = i
    if not (0 <= i < n):
        if mode == cte.BOUNDARY_REPLICATE:
            res = ti.min(ti.max(i, 0), n - 1)
        elif mode == cte.BOUNDARY_WRAP:
            res = _wrap_index(i, n)
        else:
            res = _reflect_index(i, n)
    return res


@ti.kernel
def extend_border_kernel(
    source: ti.types.ndarray(),
    target: ti.types.ndarray(),
    ny: ti.i32,
    nx: ti.i32,
    nc: ti.i32,
    top: ti.i32,
    left: ti.i32,
    boundary_mode: ti.i32,
):
    """
    Fill an extended raster from its source.

    Args:
        source: Source raster (ny, nx, nc)
        target: Extended raster (ny + top + bottom, nx + left + right, nc)
        ny: Number of rows in the source
        nx: Number of columns in the source
        nc: Number of channels
        top: Rows added above the source
        left: Columns added left of the source
        boundary_mode: One of the BOUNDARY_* constants
    """
    for j, i in ti.ndrange(target.shape[0], target.shape[1]):
        sj = _resolve_index(j - top, ny, boundary_mode)
        si = _resolve_index(i - left, nx, boundary_mode)
        for c in range(nc):
            target[j, i, c] = source[sj, si, c]


def extend_work_array(work, top: int, bottom: int, left: int, right: int, boundary_mode: int):
    """Extend a (ny, nx, nc) work array, keeping its dtype."""
    ny, nx, nc = work.shape
    target = np.empty((ny + top + bottom, nx + left + right, nc), dtype=work.dtype)
    extend_border_kernel(work, target, ny, nx, nc, top, left, boundary_mode)
    return target


def extend_border(
    grid_data,
    top: int,
    bottom: int,
    left: int,
    right: int,
    mode: str = "replicate",
):
    """
    Extend a raster by a margin on each side.

    Args:
        grid_data: Input raster (numpy array or Taichi field) of shape (ny, nx)
                   or (ny, nx, nc)
        top: Rows to add above the raster
        bottom: Rows to add below the raster
        left: Columns to add on the left
        right: Columns to add on the right
        mode: Boundary handling ('replicate', 'wrap', 'reflect')

    Returns:
        numpy.ndarray: Extended raster with the input dtype and layout

    Example:
        # Two replicated samples on every side
        extended = extend_border(image, 2, 2, 2, 2)
    """
    if mode not in cte.BOUNDARY_MODES:
        raise ValueError("mode must be 'replicate', 'wrap', or 'reflect'")
    margins = (top, bottom, left, right)
    if any(
        isinstance(m, (bool, np.bool_)) or not isinstance(m, (int, np.integer)) or m < 0
        for m in margins
    ):
        raise ValueError("margins must be non-negative integers")

    work, info = to_work_array(grid_data)
    extended = extend_work_array(
        work, int(top), int(bottom), int(left), int(right), cte.BOUNDARY_MODES[mode]
    )
    return from_work_array(extended, info)


__all__ = ["extend_border", "extend_border_kernel", "extend_work_array"]
