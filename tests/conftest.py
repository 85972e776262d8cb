"""
Pytest configuration and fixtures for the pynoisemap test suite.

Taichi is initialised once for the whole session, on the backend named by
PYNOISEMAP_ARCH (cpu when unset).
"""
import os
import sys

import numpy as np
import pytest


def pytest_configure(config):
    """Configure pytest with custom settings."""
    # Add the package root to Python path for testing
    package_root = os.path.dirname(os.path.dirname(__file__))
    if package_root not in sys.path:
        sys.path.insert(0, package_root)

    for marker in (
        "unit: fast unit tests",
        "integration: end-to-end workflows",
        "importtest: import smoke tests",
        "slow: tests compiling or running larger kernels",
    ):
        config.addinivalue_line("markers", marker)


def pytest_collection_modifyitems(config, items):
    """Mark import tests for easy selection."""
    for item in items:
        if "import" in item.name.lower() or "test_imports.py" in str(item.fspath):
            item.add_marker("importtest")


@pytest.fixture(scope="session", autouse=True)
def taichi_cpu():
    """Initialise taichi once for the session ($PYNOISEMAP_ARCH, cpu by default)."""
    import pynoisemap as pnm

    pnm.init()
    return True


@pytest.fixture
def random_values():
    """Deterministic random arrays for field tests, keyed by rank."""
    rng = np.random.default_rng(1234)

    def make(rank, size=32, low=-5.0, high=5.0):
        return rng.uniform(low, high, size=(size,) * rank)

    return make


@pytest.fixture
def lattice_points():
    """Random non-integer sample points covering negative and positive coordinates."""
    rng = np.random.default_rng(99)

    def make(n, dims, extent=20.0):
        return rng.uniform(-extent, extent, size=(n, dims))

    return make
