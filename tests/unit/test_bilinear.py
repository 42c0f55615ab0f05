"""
Tests for bilinear upsampling.
"""

import numpy as np
import pytest
import taichi as ti

from pyupsample import InvalidInputError, InvalidMagnitudeError
from pyupsample.rastermanip import bilinear_upsample

# Initialize Taichi once for the entire test module
ti.init(arch=ti.cpu)


def bilinear_reference(a, b, c, d, w, h):
    """Bilinear blend over the unit square spanned by a, b, c, d."""
    top = a + w * (b - a)
    bottom = c + w * (d - c)
    return top + h * (bottom - top)


@pytest.mark.unit
def test_known_two_by_two():
    """Worked example: corners are kept, interior follows the bilinear blend."""
    grid = np.array([[10, 20], [30, 40]], dtype=np.float64)

    result = bilinear_upsample(grid, 2)

    expected = np.array([[10, 15, 20], [20, 25, 30], [30, 35, 40]], dtype=np.float64)
    assert result.shape == (3, 3)
    np.testing.assert_allclose(result, expected)
    assert result[0, 0] == 10 and result[0, 2] == 20
    assert result[2, 0] == 30 and result[2, 2] == 40


@pytest.mark.unit
def test_interior_matches_closed_form():
    """Every sample of an interior cell matches the closed-form blend."""
    grid = np.array([[3.0, 11.0], [-7.0, 25.0]])
    magnitude = 4

    result = bilinear_upsample(grid, magnitude)

    a, b, c, d = grid[0, 0], grid[0, 1], grid[1, 0], grid[1, 1]
    for k in range(magnitude):
        for l in range(magnitude):
            expected = bilinear_reference(a, b, c, d, l / magnitude, k / magnitude)
            assert result[k, l] == pytest.approx(expected)


@pytest.mark.unit
def test_edges_degrade_to_linear():
    """Last column blends vertically only, last row horizontally only."""
    grid = np.array([[0.0, 10.0], [20.0, 50.0]])

    result = bilinear_upsample(grid, 2)

    assert result[1, 1] == pytest.approx(20.0)
    assert result[1, 2] == pytest.approx(30.0)  # between 10 and 50
    assert result[2, 1] == pytest.approx(35.0)  # between 20 and 50


@pytest.mark.unit
@pytest.mark.parametrize("magnitude", [1, 2, 3, 5])
def test_shape_and_source_samples(gradient_raster, magnitude):
    """Output shape has no extrapolation and keeps every source sample."""
    ny, nx = gradient_raster.shape

    result = bilinear_upsample(gradient_raster, magnitude)

    assert result.shape == ((ny - 1) * magnitude + 1, (nx - 1) * magnitude + 1)
    assert result.dtype == gradient_raster.dtype
    np.testing.assert_array_equal(result[::magnitude, ::magnitude], gradient_raster)


@pytest.mark.unit
def test_magnitude_one_is_identity(random_rgb_raster):
    result = bilinear_upsample(random_rgb_raster, 1)
    assert result.dtype == random_rgb_raster.dtype
    np.testing.assert_array_equal(result, random_rgb_raster)


@pytest.mark.unit
def test_linear_ramp_is_reproduced(gradient_raster):
    """A raster linear in x and y is interpolated exactly."""
    result = bilinear_upsample(gradient_raster.astype(np.float64), 2)

    y, x = np.mgrid[0:result.shape[0], 0:result.shape[1]]
    np.testing.assert_allclose(result, 5.0 * x + 10.0 * y)


@pytest.mark.unit
def test_integral_rounding():
    """Integral rasters are rounded half to even."""
    result = bilinear_upsample(np.array([[1, 2, 4]], dtype=np.uint8), 2)
    np.testing.assert_array_equal(result, [[1, 2, 2, 3, 4]])


@pytest.mark.unit
def test_channels_are_independent(random_rgb_raster):
    result = bilinear_upsample(random_rgb_raster, 3)

    for c in range(random_rgb_raster.shape[2]):
        single = bilinear_upsample(random_rgb_raster[:, :, c], 3)
        np.testing.assert_array_equal(result[:, :, c], single)


@pytest.mark.unit
def test_single_pixel():
    result = bilinear_upsample(np.array([[[7, 8]]], dtype=np.int16), 4)
    assert result.shape == (1, 1, 2)
    np.testing.assert_array_equal(result, [[[7, 8]]])


@pytest.mark.unit
def test_taichi_field_input():
    """Taichi fields are accepted as input."""
    field = ti.field(dtype=ti.f32, shape=(3, 5))
    for j in range(3):
        for i in range(5):
            field[j, i] = j * 5 + i

    result = bilinear_upsample(field, 2)

    assert result.shape == (5, 9)
    assert result.dtype == np.float32
    assert result[2, 2] == pytest.approx(6.0)


@pytest.mark.unit
@pytest.mark.parametrize("magnitude", [0, -1, 2.5, True])
def test_invalid_magnitude(magnitude):
    with pytest.raises(InvalidMagnitudeError):
        bilinear_upsample(np.ones((3, 3)), magnitude)


@pytest.mark.unit
def test_absent_image():
    with pytest.raises(InvalidInputError):
        bilinear_upsample(None, 2)
