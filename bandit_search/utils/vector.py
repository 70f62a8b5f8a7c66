"""Elementwise helpers over plain numpy vectors.

Statistical strategies keep one float per arm in fixed-length arrays and
combine them with these free functions. Every helper checks its domain
and raises ValueError instead of returning NaN or inf.
"""

from typing import Optional, Sequence, Union

import numpy as np

ArrayLike = Union[Sequence[float], np.ndarray]


def as_vector(values: ArrayLike) -> np.ndarray:
    """Copy values into a 1-D float array."""
    vector = np.array(values, dtype=float)
    if vector.ndim != 1:
        raise ValueError(f"Expected a 1-D vector, got shape {vector.shape}")
    return vector


def log(values: ArrayLike) -> np.ndarray:
    vector = as_vector(values)
    if np.any(vector <= 0):
        raise ValueError(f"log requires positive values, got {vector.tolist()}")
    return np.log(vector)


def sqrt(values: ArrayLike) -> np.ndarray:
    vector = as_vector(values)
    if np.any(vector < 0):
        raise ValueError(f"sqrt requires non-negative values, got {vector.tolist()}")
    return np.sqrt(vector)


def divide(numerator: ArrayLike, denominator: ArrayLike) -> np.ndarray:
    """Elementwise numerator / denominator."""
    num = as_vector(numerator)
    den = as_vector(denominator)
    if num.shape != den.shape:
        raise ValueError(f"Shape mismatch: {num.shape} vs {den.shape}")
    if np.any(den == 0):
        raise ValueError("Division by zero in denominator vector")
    return num / den


def subtract(minuend: ArrayLike, subtrahend: ArrayLike) -> np.ndarray:
    """Elementwise minuend - subtrahend."""
    a = as_vector(minuend)
    b = as_vector(subtrahend)
    if a.shape != b.shape:
        raise ValueError(f"Shape mismatch: {a.shape} vs {b.shape}")
    return a - b


def argmin(values: ArrayLike) -> int:
    """Index of the smallest value (first one on ties)."""
    vector = as_vector(values)
    if vector.size == 0:
        raise ValueError("argmin of an empty vector")
    return int(np.argmin(vector))


def argmax(values: ArrayLike) -> int:
    """Index of the largest value (first one on ties)."""
    vector = as_vector(values)
    if vector.size == 0:
        raise ValueError("argmax of an empty vector")
    return int(np.argmax(vector))


def argsort(values: ArrayLike, descending: bool = False) -> np.ndarray:
    """Stable ranking of indices; equal values keep their original order."""
    vector = as_vector(values)
    keys = -vector if descending else vector
    return np.argsort(keys, kind="stable")


def normalize(weights: ArrayLike) -> np.ndarray:
    """Scale non-negative weights so they sum to one."""
    vector = as_vector(weights)
    if vector.size == 0:
        raise ValueError("Cannot normalize an empty weight vector")
    if np.any(vector < 0):
        raise ValueError(f"Weights must be non-negative, got {vector.tolist()}")
    total = vector.sum()
    if not np.isfinite(total) or total <= 0:
        raise ValueError(f"Weights must have a positive finite sum, got {total}")
    return vector / total


def normalize_log(log_weights: ArrayLike) -> np.ndarray:
    """Probabilities proportional to exp(log_weights).

    The largest log-weight is shifted to zero before exponentiating, so
    the result neither overflows nor underflows to all zeros.
    """
    vector = as_vector(log_weights)
    if vector.size == 0:
        raise ValueError("Cannot normalize an empty weight vector")
    if not np.all(np.isfinite(vector)):
        raise ValueError(f"Log-weights must be finite, got {vector.tolist()}")
    shifted = np.exp(vector - vector.max())
    return shifted / shifted.sum()


def choose_one(
    weights: ArrayLike,
    rng: Optional[np.random.Generator] = None,
) -> int:
    """Draw one index with probability proportional to its weight.

    Args:
        weights: Non-negative weights (need not sum to one).
        rng: Random generator. A fresh unseeded one is used if None.

    Returns:
        Sampled index.
    """
    probabilities = normalize(weights)
    rng = rng if rng is not None else np.random.default_rng()
    return int(rng.choice(probabilities.size, p=probabilities))
