"""
Six-tap (SOI) upsampling for PyUpsample.

Upsamples a raster by 2 or 4 with the half-pel interpolation scheme of H.264
luma motion compensation.

The upsampling algorithm:
1. Horizontal pass: the six-tap kernel [1, -5, 20, 20, -5, 1] / 32 synthesizes
   the sample halfway between two horizontally adjacent source samples
2. Vertical pass: same kernel, column-wise on the source
3. Center pass: the kernel is applied vertically to the horizontal half-pel
   samples, filling the diagonal half-pel positions
4. Quadrant pass (4x only): the remaining quarter-pel positions are the
   rounded average of two neighbouring half-pel or full-pel samples

Passes 1-3 read a source extended by replicated borders, so the kernel always
has six valid taps. The last source row and column have no next neighbour and
are copied verbatim.
"""

import numpy as np
import taichi as ti

from .. import constants as cte
from .border import extend_work_array
from .raster import (
    check_magnitude,
    from_work_array,
    saturate,
    to_work_array,
    upsampled_shape,
)

_W0, _W1, _W2, _W3, _W4, _W5 = cte.SIX_TAP_WEIGHTS


@ti.func
def _six_tap(e, f, g, h, i, j, integral: ti.template()):
    """
    Half-pel sample between g and h from six consecutive samples.

    Integral samples use the +16 rounding offset and floor division, floating
    samples are divided exactly.
    """
    acc = _W0 * e + _W1 * f + _W2 * g + _W3 * h + _W4 * i + _W5 * j
    res = acc
    if ti.static(integral):
        res = (acc + cte.SIX_TAP_ROUNDING) // cte.SIX_TAP_DIVISOR
    else:
        res = acc / cte.SIX_TAP_DIVISOR
    return res


@ti.func
def _average(a, b, integral: ti.template()):
    res = a
    if ti.static(integral):
        res = (a + b + cte.AVERAGE_ROUNDING) // cte.AVERAGE_DIVISOR
    else:
        res = (a + b) / cte.AVERAGE_DIVISOR
    return res


@ti.kernel
def horizontal_half_pel_kernel(
    extended: ti.types.ndarray(),
    target: ti.types.ndarray(),
    ny: ti.i32,
    nx: ti.i32,
    nc: ti.i32,
    magnitude: ti.i32,
    integral: ti.template(),
):
    """
    Place source samples and synthesize the horizontal half-pel samples.

    Args:
        extended: Source extended by SIX_TAP_MARGIN on each side
        target: Output raster ((ny-1)*magnitude+1, (nx-1)*magnitude+1, nc)
        ny: Number of source rows
        nx: Number of source columns
        nc: Number of channels
        magnitude: 2 or 4
    """
    half = magnitude // 2
    for j, i in ti.ndrange(ny, nx - 1):
        y = j + cte.SIX_TAP_MARGIN
        x = i + cte.SIX_TAP_MARGIN
        for c in range(nc):
            target[j * magnitude, i * magnitude, c] = extended[y, x, c]
            target[j * magnitude, i * magnitude + half, c] = _six_tap(
                extended[y, x - 2, c],
                extended[y, x - 1, c],
                extended[y, x, c],
                extended[y, x + 1, c],
                extended[y, x + 2, c],
                extended[y, x + 3, c],
                integral,
            )


@ti.kernel
def vertical_half_pel_kernel(
    extended: ti.types.ndarray(),
    target: ti.types.ndarray(),
    ny: ti.i32,
    nx: ti.i32,
    nc: ti.i32,
    magnitude: ti.i32,
    integral: ti.template(),
):
    """Place source samples and synthesize the vertical half-pel samples."""
    half = magnitude // 2
    for j, i in ti.ndrange(ny - 1, nx):
        y = j + cte.SIX_TAP_MARGIN
        x = i + cte.SIX_TAP_MARGIN
        for c in range(nc):
            target[j * magnitude, i * magnitude, c] = extended[y, x, c]
            target[j * magnitude + half, i * magnitude, c] = _six_tap(
                extended[y - 2, x, c],
                extended[y - 1, x, c],
                extended[y, x, c],
                extended[y + 1, x, c],
                extended[y + 2, x, c],
                extended[y + 3, x, c],
                integral,
            )


@ti.kernel
def center_half_pel_kernel(
    extended_target: ti.types.ndarray(),
    target: ti.types.ndarray(),
    ny: ti.i32,
    nx: ti.i32,
    nc: ti.i32,
    magnitude: ti.i32,
    integral: ti.template(),
):
    """
    Synthesize the diagonal half-pel samples.

    Filters vertically the horizontal half-pel samples of the partial output.

    Args:
        extended_target: Partial output after the horizontal and vertical
                         passes, extended by SIX_TAP_MARGIN * magnitude
        target: Output raster
    """
    half = magnitude // 2
    for j, i in ti.ndrange(ny - 1, nx - 1):
        # Row of tap k in the extended output is (j + k) * magnitude
        x = (i + cte.SIX_TAP_MARGIN) * magnitude + half
        for c in range(nc):
            target[j * magnitude + half, i * magnitude + half, c] = _six_tap(
                extended_target[j * magnitude, x, c],
                extended_target[(j + 1) * magnitude, x, c],
                extended_target[(j + 2) * magnitude, x, c],
                extended_target[(j + 3) * magnitude, x, c],
                extended_target[(j + 4) * magnitude, x, c],
                extended_target[(j + 5) * magnitude, x, c],
                integral,
            )


@ti.kernel
def quadrant_kernel(
    coarse: ti.types.ndarray(),
    target: ti.types.ndarray(),
    ny: ti.i32,
    nx: ti.i32,
    nc: ti.i32,
    integral: ti.template(),
):
    """
    Fill the quarter-pel positions of every interior 4x4 cell.

    Args:
        coarse: Completed 2x pipeline output on the 4x grid
        target: Output raster
        ny: Number of source rows
        nx: Number of source columns
        nc: Number of channels
    """
    for j, i in ti.ndrange(ny - 1, nx - 1):
        y0 = j * cte.MAGNITUDE_QUADRUPLE
        x0 = i * cte.MAGNITUDE_QUADRUPLE
        for c in range(nc):
            G = coarse[y0, x0, c]
            b = coarse[y0, x0 + 2, c]
            H = coarse[y0, x0 + 4, c]
            h = coarse[y0 + 2, x0, c]
            m = coarse[y0 + 2, x0 + 4, c]
            jj = coarse[y0 + 2, x0 + 2, c]
            M = coarse[y0 + 4, x0, c]
            s = coarse[y0 + 4, x0 + 2, c]

            target[y0, x0 + 1, c] = _average(G, b, integral)
            target[y0, x0 + 3, c] = _average(H, b, integral)
            target[y0 + 1, x0, c] = _average(G, h, integral)
            target[y0 + 1, x0 + 1, c] = _average(b, h, integral)
            target[y0 + 1, x0 + 2, c] = _average(b, jj, integral)
            target[y0 + 1, x0 + 3, c] = _average(b, m, integral)
            target[y0 + 2, x0 + 1, c] = _average(h, jj, integral)
            target[y0 + 2, x0 + 3, c] = _average(jj, m, integral)
            target[y0 + 3, x0, c] = _average(M, h, integral)
            target[y0 + 3, x0 + 1, c] = _average(h, s, integral)
            target[y0 + 3, x0 + 2, c] = _average(jj, s, integral)
            target[y0 + 3, x0 + 3, c] = _average(m, s, integral)


@ti.kernel
def quadrant_edges_kernel(
    coarse: ti.types.ndarray(),
    target: ti.types.ndarray(),
    ny: ti.i32,
    nx: ti.i32,
    nc: ti.i32,
    integral: ti.template(),
):
    """Fill the quarter-pel positions of the last row and the last column."""
    last_row = (ny - 1) * cte.MAGNITUDE_QUADRUPLE
    last_col = (nx - 1) * cte.MAGNITUDE_QUADRUPLE

    for i, c in ti.ndrange(nx - 1, nc):
        x0 = i * cte.MAGNITUDE_QUADRUPLE
        G = coarse[last_row, x0, c]
        b = coarse[last_row, x0 + 2, c]
        H = coarse[last_row, x0 + 4, c]
        target[last_row, x0 + 1, c] = _average(G, b, integral)
        target[last_row, x0 + 3, c] = _average(H, b, integral)

    for j, c in ti.ndrange(ny - 1, nc):
        y0 = j * cte.MAGNITUDE_QUADRUPLE
        G = coarse[y0, last_col, c]
        h = coarse[y0 + 2, last_col, c]
        M = coarse[y0 + 4, last_col, c]
        target[y0 + 1, last_col, c] = _average(G, h, integral)
        target[y0 + 3, last_col, c] = _average(M, h, integral)


def sixtap_upsample(grid_data, magnitude: int):
    """
    Upsample a raster by 2 or 4 with the six-tap (SOI) filter.

    Output shape is ((ny-1)*magnitude+1, (nx-1)*magnitude+1): every source
    sample (y, x) lands unchanged on (y*magnitude, x*magnitude) and nothing is
    extrapolated beyond the last row and column.

    Args:
        grid_data: Input raster (numpy array or Taichi field) of shape (ny, nx)
                   or (ny, nx, nc), integral or floating
        magnitude: MAGNITUDE_DOUBLE (2) or MAGNITUDE_QUADRUPLE (4)

    Returns:
        numpy.ndarray: Upsampled raster with the input dtype and layout

    Raises:
        InvalidInputError: If grid_data is absent or not a raster
        InvalidMagnitudeError: If magnitude is not 2 or 4

    Example:
        # Quadruple a uint8 RGB image
        big = sixtap_upsample(rgb, 4)
    """
    work, info = to_work_array(grid_data)
    magnitude = check_magnitude(magnitude, accepted=cte.SIXTAP_MAGNITUDES)
    integral = info.integral

    ny, nx, nc = work.shape
    out_ny, out_nx = upsampled_shape(ny, nx, magnitude)
    target = np.zeros((out_ny, out_nx, nc), dtype=work.dtype)

    margin = cte.SIX_TAP_MARGIN
    extended = extend_work_array(
        work, margin, margin, margin, margin, cte.BOUNDARY_REPLICATE
    )

    horizontal_half_pel_kernel(extended, target, ny, nx, nc, magnitude, integral)
    vertical_half_pel_kernel(extended, target, ny, nx, nc, magnitude, integral)

    # Last source column and row have no next neighbour
    target[::magnitude, -1] = work[:, -1]
    target[-1, ::magnitude] = work[-1, :]
    saturate(target, info)

    extended_margin = margin * magnitude
    extended_target = extend_work_array(
        target,
        extended_margin,
        extended_margin,
        extended_margin,
        extended_margin,
        cte.BOUNDARY_REPLICATE,
    )
    center_half_pel_kernel(extended_target, target, ny, nx, nc, magnitude, integral)
    saturate(target, info)

    if magnitude == cte.MAGNITUDE_DOUBLE:
        return from_work_array(target, info)

    coarse = target.copy()
    quadrant_kernel(coarse, target, ny, nx, nc, integral)
    quadrant_edges_kernel(coarse, target, ny, nx, nc, integral)

    return from_work_array(target, info)


__all__ = [
    "sixtap_upsample",
    "horizontal_half_pel_kernel",
    "vertical_half_pel_kernel",
    "center_half_pel_kernel",
    "quadrant_kernel",
    "quadrant_edges_kernel",
]
