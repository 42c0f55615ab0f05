"""
Command Line Interface for PyUpsample

Command line utilities for upsampling rasters from the terminal without
writing Python scripts.

Available Commands:
- raster_upsample: Upsample an image or .npy raster (pyu-upsample)
"""

_CLI_SUBMODULES = {
    "raster_upsample": (".upsample_commands", "raster_upsample"),
}

__all__ = list(_CLI_SUBMODULES.keys())


def __getattr__(name):
    info = _CLI_SUBMODULES.get(name)
    if info is None:
        raise AttributeError(name)
    pkg, attr = info
    import importlib
    mod = importlib.import_module(pkg, __package__)
    obj = getattr(mod, attr)
    globals()[name] = obj
    return obj
