import os
import numpy as np
import pytest

from rvizmesh_geom.core.transform import RigidTransform


@pytest.fixture(scope="session")
def rng_seed():
    return int(os.environ.get("RVIZMESH_TEST_SEED", "1234"))


@pytest.fixture
def rng(rng_seed):
    return np.random.default_rng(rng_seed)


@pytest.fixture
def identity():
    return RigidTransform.identity()


@pytest.fixture
def cw_triangle():
    return np.array([[0.0, 0.0], [0.0, 1.0], [1.0, 0.0]])


@pytest.fixture
def ccw_triangle():
    return np.array([[0.0, 0.0], [1.0, 0.0], [0.0, 1.0]])
