import matplotlib as mpl
import numpy as np
import pytest

import planckwave

mpl.use("Agg")


@pytest.fixture(scope="function")
def rng():
    """
    Returns a seeded numpy random generator
    """
    return np.random.default_rng(seed=42)


@pytest.fixture(scope="function")
def sun():
    """
    Returns a planckwave.BlackBody() object for the Sun
    """
    return planckwave.get_source("sun")
