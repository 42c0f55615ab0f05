"""
Pytest configuration and fixtures for PyUpsample test suite.

This file contains shared fixtures, test configuration, and utilities
used across the test suite.
"""
import os
import sys
import pytest
import numpy as np


def pytest_configure(config):
    """Configure pytest with custom settings."""
    # Add the package root to Python path for testing
    package_root = os.path.dirname(os.path.dirname(__file__))
    if package_root not in sys.path:
        sys.path.insert(0, package_root)

    for marker in (
        "unit: fast tests of a single function",
        "integration: end-to-end workflows",
        "importtest: module import checks",
        "slow: tests that take noticeable time",
    ):
        config.addinivalue_line("markers", marker)


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers."""
    for item in items:
        # Import tests for easy selection
        if "import" in item.name.lower() or "test_imports.py" in str(item.fspath):
            item.add_marker("importtest")


@pytest.fixture(scope="session")
def gradient_raster():
    """Single channel uint8 raster with a smooth diagonal gradient."""
    ny, nx = 6, 9
    y, x = np.mgrid[0:ny, 0:nx]
    return (10 * x + 20 * y).astype(np.uint8)


@pytest.fixture(scope="session")
def random_rgb_raster():
    """Random uint8 RGB raster."""
    rng = np.random.default_rng(42)
    return rng.integers(0, 256, size=(7, 5, 3), dtype=np.uint8)


@pytest.fixture
def skip_if_no_taichi():
    """Skip test if Taichi is not available or fails to initialize."""
    try:
        import taichi as ti
        ti.init(arch=ti.cpu, offline_cache=False)
        return True
    except Exception:
        pytest.skip("Taichi not available or initialization failed")


class TestDataManager:
    """Helper class for creating test rasters."""

    @staticmethod
    def create_step_edge(ny=4, nx=8, low=0, high=200, dtype=np.uint8):
        """Raster whose left half is `low` and right half is `high`."""
        raster = np.full((ny, nx), low, dtype=dtype)
        raster[:, nx // 2:] = high
        return raster

    @staticmethod
    def create_constant(ny=5, nx=6, nc=3, value=77, dtype=np.uint8):
        """Raster with every sample equal to `value`."""
        return np.full((ny, nx, nc), value, dtype=dtype)

    @staticmethod
    def create_image(ny=12, nx=16):
        """Small RGB image with distinct patterns per channel."""
        y, x = np.mgrid[0:ny, 0:nx]
        red = (x * 255 // max(nx - 1, 1))
        green = (y * 255 // max(ny - 1, 1))
        blue = ((x + y) % 2) * 255
        return np.stack([red, green, blue], axis=-1).astype(np.uint8)


@pytest.fixture
def test_data_manager():
    """Provide access to test data creation utilities."""
    return TestDataManager()
