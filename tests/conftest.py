"""Pytest configuration for poseidon252 tests."""

import sys
from pathlib import Path

import numpy as np
import pytest

# Add the repository root to the path so the package imports without installing
repo_dir = Path(__file__).parent.parent
if str(repo_dir) not in sys.path:
    sys.path.insert(0, str(repo_dir))

from poseidon252.primitives.field import random_scalar  # noqa: E402


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(0xBEEF)


@pytest.fixture
def random_messages(rng):
    """Factory for lists of random field elements."""

    def make(n: int):
        return [random_scalar(rng) for _ in range(n)]

    return make
