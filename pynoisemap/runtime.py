"""
Taichi runtime management for pynoisemap.

Kernels are compiled in double precision, so taichi has to be initialised with
``default_fp=ti.f64``. ``init`` does that explicitly; every public entry point
calls ``ensure_initialized`` so the first call initialises lazily.

The state is read from taichi itself rather than tracked here. A taichi
session opened by the caller with ``default_fp=ti.f64`` is reused as is, so its
fields survive. A session in any other precision is rejected instead of being
silently reset, and so is a session re-initialised after ``init`` without f64.

The backend is chosen from the ``arch`` argument, then from the
``PYNOISEMAP_ARCH`` environment variable, then defaults to CPU.
"""

import os

import taichi as ti
from taichi.lang import impl as ti_impl

from . import constants as cte

_ARCHS = {
    "cpu": ti.cpu,
    "gpu": ti.gpu,
    "cuda": ti.cuda,
    "vulkan": ti.vulkan,
    "metal": ti.metal,
}

def resolve_arch(arch=None):
    """
    Resolve a backend name (or taichi arch) to a taichi arch.

    Args:
        arch: Backend name, taichi arch, or None to read the environment

    Returns:
        taichi arch object

    Raises:
        ValueError: If the backend name is unknown
    """
    if arch is None:
        arch = os.environ.get(cte.ARCH_ENV_VAR, "cpu")
    if not isinstance(arch, str):
        return arch
    try:
        return _ARCHS[arch.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown taichi backend '{arch}'. Expected one of {sorted(_ARCHS)}"
        )


def init(arch=None, **kwargs):
    """
    Initialise taichi for pynoisemap kernels.

    Args:
        arch: Backend name ("cpu", "gpu", ...) or taichi arch (default: env or cpu)
        **kwargs: Extra keyword arguments forwarded to ``ti.init``
    """
    kwargs.setdefault("default_fp", cte.FLOAT_TYPE_TI)
    kwargs.setdefault("default_ip", cte.INT_TYPE_TI)
    ti.init(arch=resolve_arch(arch), **kwargs)


def _active_runtime():
    rt = ti_impl.get_runtime()
    return rt if rt.prog is not None else None


def ensure_initialized():
    """
    Initialise taichi with defaults when no taichi session is open.

    Raises:
        RuntimeError: If an open session does not compute in f64
    """
    rt = _active_runtime()
    if rt is None:
        init()
    elif rt.default_fp != cte.FLOAT_TYPE_TI:
        raise RuntimeError(
            f"taichi was initialised with default_fp={rt.default_fp}; pynoisemap kernels "
            "need default_fp=ti.f64. Call pynoisemap.init() or ti.init(default_fp=ti.f64)."
        )


def is_initialized():
    """True when a taichi session computing in f64 is open."""
    rt = _active_runtime()
    return rt is not None and rt.default_fp == cte.FLOAT_TYPE_TI
