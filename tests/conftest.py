"""Shared fixtures for boxblur tests."""

import numpy as np
import pytest

from boxblur.device import setup_opencl
from boxblur.errors import NoDeviceError


@pytest.fixture(scope="session")
def opencl():
    """OpenCL (context, queue, device), or skip when no platform is present."""
    try:
        return setup_opencl()
    except NoDeviceError as e:
        pytest.skip(f"no OpenCL device available: {e}")


@pytest.fixture
def random_image() -> np.ndarray:
    """A 23x17 float32 RGBA image with values in [0, 1]."""
    rng = np.random.default_rng(1234)
    return rng.random((23, 17, 4), dtype=np.float32)
