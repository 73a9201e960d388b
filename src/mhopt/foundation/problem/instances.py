"""
Readers for QBF / KQBF instance files.

Both formats are plain whitespace-separated numbers. A QBF instance holds the
size ``n`` followed by the upper triangle of the coefficient matrix, row by
row. A KQBF instance holds ``n``, the knapsack capacity, the ``n`` item
weights and then the same upper triangle.
"""

from __future__ import annotations

import math
from pathlib import Path

import numpy as np

from mhopt.foundation.exceptions import InstanceNotFoundError, InvalidInstanceError


def _read_numbers(path: str | Path) -> tuple[list[float], str]:
    inst_path = Path(path).expanduser()
    where = str(inst_path)
    try:
        text = inst_path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise InstanceNotFoundError(where) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise InvalidInstanceError(f"Could not read instance '{where}': {exc}", path=where) from exc
    try:
        values = [float(tok) for tok in text.split()]
    except ValueError as exc:
        raise InvalidInstanceError(f"Instance '{where}' contains a non-numeric token: {exc}", path=where) from exc
    if not values:
        raise InvalidInstanceError(f"Instance '{where}' is empty.", path=where)
    if not all(math.isfinite(v) for v in values):
        raise InvalidInstanceError(f"Instance '{where}' contains a non-finite value.", path=where)
    return values, where


def _read_size(values: list[float], where: str) -> int:
    raw = values[0]
    if raw != int(raw) or raw <= 0:
        raise InvalidInstanceError(f"Instance '{where}' declares an invalid size {raw!r}.", path=where)
    return int(raw)


def _upper_triangle(values: list[float], start: int, n: int, where: str) -> np.ndarray:
    needed = n * (n + 1) // 2
    available = len(values) - start
    if available < needed:
        raise InvalidInstanceError(
            f"Instance '{where}' has {available} matrix coefficients; expected {needed} for n={n}.",
            path=where,
        )
    A = np.zeros((n, n), dtype=float)
    rows, cols = np.triu_indices(n)
    A[rows, cols] = values[start : start + needed]
    return A


def read_qbf_instance(path: str | Path) -> np.ndarray:
    """Return the (upper triangular) QBF coefficient matrix stored in ``path``."""
    values, where = _read_numbers(path)
    n = _read_size(values, where)
    return _upper_triangle(values, 1, n, where)


def read_kqbf_instance(path: str | Path) -> tuple[np.ndarray, np.ndarray, float]:
    """Return ``(matrix, weights, capacity)`` for a knapsack QBF instance."""
    values, where = _read_numbers(path)
    n = _read_size(values, where)
    if len(values) < 2 + n:
        raise InvalidInstanceError(f"Instance '{where}' is missing the capacity or item weights.", path=where)
    capacity = float(values[1])
    weights = np.asarray(values[2 : 2 + n], dtype=float)
    return _upper_triangle(values, 2 + n, n, where), weights, capacity


__all__ = ["read_qbf_instance", "read_kqbf_instance"]
