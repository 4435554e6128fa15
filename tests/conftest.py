import io

import numpy as np
import pytest

from termrain.config import RainConfig


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def quick_config():
    """Small, fast settings for driving whole runs in tests."""
    return RainConfig(particle_count=20, tick_interval=0.0, audio_poll_interval=0.05)
