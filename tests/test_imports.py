"""
Import tests for all PyUpsample modules and submodules.

These tests ensure that all modules can be imported without errors,
which is crucial for detecting import-related issues early.
"""
import pytest


class TestMainPackageImports:
    """Test imports for the main pyupsample package."""

    @pytest.mark.importtest
    def test_main_package_import(self):
        """Test that the main pyupsample package can be imported."""
        import pyupsample
        assert hasattr(pyupsample, '__version__')
        assert hasattr(pyupsample, '__all__')

    @pytest.mark.importtest
    def test_constants_import(self):
        """Test that constants module can be imported."""
        import pyupsample.constants as cte
        assert cte.SIXTAP_MAGNITUDES == (2, 4)
        assert sum(cte.SIX_TAP_WEIGHTS) == cte.SIX_TAP_DIVISOR

    @pytest.mark.importtest
    def test_exceptions_import(self):
        """Test that exceptions are exposed at package level."""
        import pyupsample
        assert issubclass(pyupsample.InvalidInputError, pyupsample.UpsampleError)
        assert issubclass(pyupsample.InvalidMagnitudeError, ValueError)


class TestRastermanipImports:
    """Test imports for raster manipulation modules."""

    @pytest.mark.importtest
    def test_rastermanip_init_import(self):
        """Test rastermanip package import."""
        import pyupsample.rastermanip as rm
        for name in ("bilinear_upsample", "sixtap_upsample", "extend_border", "upsample"):
            assert callable(getattr(rm, name))

    @pytest.mark.importtest
    def test_rastermanip_submodules_import(self):
        """Test individual rastermanip modules."""
        import pyupsample.rastermanip.bilinear
        import pyupsample.rastermanip.border
        import pyupsample.rastermanip.raster
        import pyupsample.rastermanip.sixtap
        import pyupsample.rastermanip.upsampling
        assert pyupsample.rastermanip.sixtap.sixtap_upsample is not None


class TestMiscImports:
    """Test imports for misc utilities."""

    @pytest.mark.importtest
    def test_misc_import(self):
        """Test misc package import."""
        import pyupsample.misc
        assert callable(pyupsample.misc.load_raster)
        assert callable(pyupsample.misc.save_raster)


class TestCLIImports:
    """Test imports for CLI modules."""

    @pytest.mark.importtest
    def test_cli_init_import(self):
        """Test CLI package import."""
        import pyupsample.cli
        assert pyupsample.cli is not None

    @pytest.mark.importtest
    def test_cli_lazy_attribute(self):
        """Test that CLI commands resolve lazily."""
        import pyupsample.cli
        assert callable(pyupsample.cli.raster_upsample)
        with pytest.raises(AttributeError):
            pyupsample.cli.not_a_command
