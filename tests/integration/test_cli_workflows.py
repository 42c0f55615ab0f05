"""
Integration tests for the pyu-upsample command on image files.
"""
import numpy as np
import pytest
from click.testing import CliRunner


@pytest.mark.integration
def test_cli_png_quadruple(tmp_path, test_data_manager):
    """Quadruple a PNG with both methods, as the original driver program did."""
    from pyupsample.cli.upsample_commands import raster_upsample
    from pyupsample.misc import load_raster, save_raster

    image = test_data_manager.create_image(ny=8, nx=10)
    src = tmp_path / "folder.png"
    save_raster(image, str(src))

    runner = CliRunner()
    result = runner.invoke(
        raster_upsample, [str(src), str(tmp_path / "folder.png"), "-m", "both", "-x", "4"]
    )

    assert result.exit_code == 0, result.output
    for method in ("bilinear", "sixtap"):
        out = load_raster(str(tmp_path / f"folder_{method}.png"))
        assert out.shape == (29, 37, 3)
        np.testing.assert_array_equal(out[::4, ::4], image)
