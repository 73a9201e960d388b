from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

# f({0}) = 2 is the unique maximum of this 3-variable QBF.
SMALL_MATRIX = np.array(
    [
        [2.0, -3.0, 1.0],
        [0.0, 1.0, 4.0],
        [0.0, 0.0, -5.0],
    ]
)
SMALL_WEIGHTS = np.array([2.0, 2.0, 3.0])
SMALL_CAPACITY = 4.0


def random_matrix(n: int, seed: int) -> np.ndarray:
    rng = np.random.default_rng(seed)
    return np.triu(rng.integers(-10, 11, size=(n, n)).astype(float))


@pytest.fixture
def small_matrix() -> np.ndarray:
    return SMALL_MATRIX.copy()


@pytest.fixture
def qbf_path(tmp_path: Path) -> Path:
    path = tmp_path / "qbf003"
    path.write_text("3\n2 -3 1\n1 4\n-5\n", encoding="utf-8")
    return path


@pytest.fixture
def kqbf_path(tmp_path: Path) -> Path:
    path = tmp_path / "kqbf003"
    path.write_text("3\n4\n2 2 3\n2 -3 1\n1 4\n-5\n", encoding="utf-8")
    return path


@pytest.fixture
def matrix_factory():
    return random_matrix
