import numpy as np
import pytest

from lotofacil_pro.models import FilterConfig


@pytest.fixture
def rng():
    return np.random.default_rng(20240101)


@pytest.fixture
def all_off():
    return FilterConfig(
        reps_enabled=False,
        evens_enabled=False,
        primes_enabled=False,
        fib_enabled=False,
        seq_enabled=False,
    )
