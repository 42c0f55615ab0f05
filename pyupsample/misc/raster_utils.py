"""
Raster file utilities for PyUpsample.

Loads images and NumPy arrays into rasters and writes rasters back, so the
upsamplers can be driven from files. Image files go through Pillow; files with
a .npy suffix go through NumPy and keep their dtype.
"""

import os

import numpy as np
from PIL import Image

# Pillow modes that map directly onto a numpy raster
_DIRECT_MODES = {"L", "RGB", "RGBA", "I", "F", "I;16"}


def _is_npy(path) -> bool:
    return os.fspath(path).lower().endswith(".npy")


def load_raster(path):
    """
    Load a raster from an image file or a .npy file.

    Palette, bilevel and other Pillow modes are converted to RGB (or RGBA when
    the image carries transparency) before conversion.

    Args:
        path (str): Path to an image readable by Pillow, or a .npy file

    Returns:
        numpy.ndarray: Raster of shape (ny, nx) or (ny, nx, nc)

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file cannot be decoded
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Raster file '{path}' not found")

    if _is_npy(path):
        return np.load(path)

    try:
        with Image.open(path) as img:
            if img.mode not in _DIRECT_MODES:
                has_alpha = img.mode in ("PA", "LA") or "transparency" in img.info
                img = img.convert("RGBA" if has_alpha else "RGB")
            return np.array(img)
    except OSError as e:
        raise ValueError(f"Failed to read image '{path}': {e}")


def save_raster(raster, path, verbose: bool = False):
    """
    Save a raster to an image file or a .npy file.

    Single channel integer rasters wider than uint8 are saturated to uint16
    and written as 16-bit images. Multichannel uint16 rasters are reduced to
    8 bits per sample; any other dtype is saturated to uint8. Single channel
    rasters become 'L' (or 'I;16') images, 3 channels 'RGB' and 4 channels
    'RGBA'.

    Args:
        raster (numpy.ndarray): Raster of shape (ny, nx) or (ny, nx, nc)
        path (str): Output path; the suffix selects the format
        verbose (bool): Print a short summary after writing

    Raises:
        ValueError: If the channel count has no image mode
        OSError: If the file cannot be written
    """
    raster = np.asarray(raster)

    if _is_npy(path):
        np.save(path, raster)
    else:
        if raster.ndim == 3 and raster.shape[2] == 1:
            raster = raster[:, :, 0]
        if raster.ndim == 3 and raster.shape[2] not in (3, 4):
            raise ValueError(
                f"Cannot write a {raster.shape[2]}-channel raster as an image, use .npy instead"
            )
        if raster.ndim == 2 and raster.dtype != np.uint8 and np.issubdtype(raster.dtype, np.integer):
            # Wide single channel samples are kept as a 16-bit image
            raster = np.clip(raster, 0, 65535).astype(np.uint16)
        elif raster.dtype == np.uint16:
            raster = (raster >> 8).astype(np.uint8)
        elif raster.dtype != np.uint8:
            raster = np.clip(np.rint(raster), 0, 255).astype(np.uint8)
        try:
            Image.fromarray(raster).save(path)
        except (OSError, ValueError) as e:
            raise OSError(f"Failed to save raster to '{path}': {e}")

    if verbose:
        print(f"Saved raster '{path}'")
        print(f"Raster shape: {raster.shape}")
        print(f"Value range: [{raster.min()}, {raster.max()}]")
