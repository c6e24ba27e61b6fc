"""
Pytest fixtures shared by the dnagraph tests.
"""

import numpy as np
import pytest

from dnagraph.datasets import load_dataset
from dnagraph.models import load_codec


@pytest.fixture
def rng():
    """Seeded random generator, so random graphs are reproducible."""
    return np.random.default_rng(0)


@pytest.fixture
def triangle_loops():
    """G=({a,b,c},{(a,b),(a,c),(b,b),(b,c),(c,b)})"""
    return load_dataset("triangle_loops")


@pytest.fixture(params=["sum", "fixed_length", "huffman"])
def codec(request):
    """Every codec producing DNA sequences."""
    return load_codec(request.param)
