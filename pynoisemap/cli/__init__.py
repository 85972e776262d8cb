"""
Command Line Interface for pynoisemap

This module provides command line utilities for pynoisemap, enabling noise
fields to be generated and inspected from the terminal without writing Python
scripts.

Available Commands:
- generate: Generate a fractal noise field and save it as a .npy array
- noise2png: Convert a 2-D noise array to a PNG image
"""

_CLI_SUBMODULES = {
    "generate": (".generate_commands", "generate"),
    "noise2png": (".noise2png_commands", "noise2png"),
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
