import numpy as np
import pytest


@pytest.fixture
def unit_square():
    return np.array([[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0]])


@pytest.fixture
def random_points():
    rng = np.random.RandomState(0)
    return rng.uniform(-1.0, 1.0, size=(40, 2))


@pytest.fixture
def two_clusters():
    """Two collinear triples 8 units apart."""
    return np.array(
        [[0.0, 0.0], [1.0, 0.0], [2.0, 0.0], [10.0, 0.0], [11.0, 0.0], [12.0, 0.0]]
    )


@pytest.fixture
def semicircle():
    t = np.linspace(0.0, np.pi, 30)
    return t, np.column_stack([np.cos(t), np.sin(t)])
