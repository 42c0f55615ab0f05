"""
Raster conversion helpers for the upsampling kernels.

Rasters enter the package as NumPy arrays of shape (ny, nx) or (ny, nx, nc),
or as Taichi fields exposing ``to_numpy``. The kernels always see a contiguous
(ny, nx, nc) work array in a wide type: int64 for integral rasters and float64
for floating rasters. Results are converted back to the caller's dtype and
layout on the way out.
"""

import numpy as np

from ..exceptions import InvalidInputError, InvalidMagnitudeError


class RasterInfo:
    """Layout and dtype of a caller raster, needed to restore the output."""

    def __init__(self, dtype, squeeze: bool):
        self.dtype = np.dtype(dtype)
        self.squeeze = squeeze

    @property
    def integral(self) -> bool:
        return np.issubdtype(self.dtype, np.integer)

    @property
    def work_dtype(self):
        return np.int64 if self.integral else np.float64


def to_work_array(grid_data):
    """
    Convert an input raster into a (ny, nx, nc) work array.

    Args:
        grid_data: NumPy array or Taichi field of shape (ny, nx) or (ny, nx, nc)

    Returns:
        tuple: (work array, RasterInfo)

    Raises:
        InvalidInputError: If the raster is absent, empty, not numeric or
                           made of 64-bit integers
    """
    if grid_data is None:
        raise InvalidInputError("No image provided")

    if isinstance(grid_data, np.ndarray):
        data_np = grid_data
    elif hasattr(grid_data, "to_numpy"):
        data_np = grid_data.to_numpy()
    else:
        raise InvalidInputError(
            "Image must be a numpy array or Taichi field",
            f"Got {type(grid_data).__name__}",
        )

    if data_np.ndim not in (2, 3):
        raise InvalidInputError(
            "Image must be 2D (ny, nx) or 3D (ny, nx, nc)", f"Shape: {data_np.shape}"
        )
    if data_np.dtype == np.bool_ or not (
        np.issubdtype(data_np.dtype, np.integer)
        or np.issubdtype(data_np.dtype, np.floating)
    ):
        raise InvalidInputError("Image samples must be integers or floats", f"Dtype: {data_np.dtype}")
    if np.issubdtype(data_np.dtype, np.integer) and data_np.dtype.itemsize > 4:
        # Filter sums of 64-bit samples do not fit the int64 work type
        raise InvalidInputError(
            "Integer samples wider than 32 bits are not supported", f"Dtype: {data_np.dtype}"
        )
    if data_np.shape[0] < 1 or data_np.shape[1] < 1:
        raise InvalidInputError("Image must have at least one row and one column", f"Shape: {data_np.shape}")

    squeeze = data_np.ndim == 2
    if squeeze:
        data_np = data_np[:, :, np.newaxis]
    elif data_np.shape[2] < 1:
        raise InvalidInputError("Image must have at least one channel", f"Shape: {data_np.shape}")

    info = RasterInfo(data_np.dtype, squeeze)
    work = np.ascontiguousarray(data_np, dtype=info.work_dtype)
    return work, info


def saturate(work, info: RasterInfo):
    """Clamp integral work values in place to the range of the raster dtype."""
    if info.integral:
        limits = np.iinfo(info.dtype)
        np.clip(work, max(limits.min, np.iinfo(np.int64).min), min(limits.max, np.iinfo(np.int64).max), out=work)
    return work


def from_work_array(work, info: RasterInfo):
    """
    Convert a (ny, nx, nc) work array back to the caller's dtype and layout.

    Integral rasters are rounded to nearest (half to even) and saturated.
    """
    if info.integral:
        if np.issubdtype(work.dtype, np.floating):
            work = np.rint(work)
            limits = np.iinfo(info.dtype)
            work = np.clip(work, limits.min, limits.max)
        else:
            work = saturate(work, info)
    result = work.astype(info.dtype)
    if info.squeeze:
        result = result[:, :, 0]
    return result


def check_magnitude(magnitude, accepted=None, minimum=None):
    """
    Validate a magnitude against an accepted set or a lower bound.

    Args:
        magnitude: Candidate magnitude
        accepted: Iterable of accepted magnitudes, or None
        minimum: Smallest accepted magnitude, or None

    Returns:
        int: The magnitude as a Python int

    Raises:
        InvalidMagnitudeError: If the magnitude is rejected
    """
    if accepted is not None:
        description = "one of " + ", ".join(str(m) for m in accepted)
    else:
        description = f"integer >= {minimum}"

    if isinstance(magnitude, (bool, np.bool_)) or not isinstance(magnitude, (int, np.integer)):
        raise InvalidMagnitudeError("Magnitude must be an integer", magnitude, description)

    magnitude = int(magnitude)
    if accepted is not None and magnitude not in accepted:
        raise InvalidMagnitudeError("Unsupported magnitude", magnitude, description)
    if minimum is not None and magnitude < minimum:
        raise InvalidMagnitudeError(f"Magnitude must be at least {minimum}", magnitude, description)
    return magnitude


def upsampled_shape(ny: int, nx: int, magnitude: int):
    """Shape (ny, nx) of a raster upsampled by magnitude without extrapolation."""
    return (ny - 1) * magnitude + 1, (nx - 1) * magnitude + 1


__all__ = [
    "RasterInfo",
    "to_work_array",
    "from_work_array",
    "saturate",
    "check_magnitude",
    "upsampled_shape",
]
