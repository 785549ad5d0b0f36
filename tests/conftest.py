"""Global test configuration and lightweight fixtures.

Seeds RNGs for deterministic runs, provides shared array fixtures and
auto-marks property tests.
"""

import os
import random
from pathlib import Path

import numpy as np
import pytest

from hyperint import BigArray


def pytest_sessionstart(session: pytest.Session) -> None:
    """Seed common RNGs to improve test determinism."""
    seed = int(os.environ.get("HYPERINT_TEST_SEED", "12345"))
    random.seed(seed)
    np.random.seed(seed)


@pytest.fixture
def small_values() -> list:
    return [5, -3, 10**30, 7, 0, -(10**25), 42, 8]


@pytest.fixture
def max_array(small_values) -> BigArray:
    return BigArray.from_values(small_values, initial_capacity=4)


def pytest_collection_modifyitems(session: pytest.Session, config: pytest.Config, items: list) -> None:
    """Auto-mark tests under tests/property with the 'property' marker.

    CI selects property tests via `-m property`.
    """
    for item in items:
        p = Path(str(item.fspath))
        if "property" in p.parts and "tests" in p.parts:
            item.add_marker(pytest.mark.property)
