"""Element-wise vector addition with a tolerance check of the result."""

from __future__ import annotations

import sys
import time
from typing import Iterator

import numpy as np

from hostcompute.transpose import random_values

DEFAULT_LENGTH = 1024
TOLERANCE = 0.001


def _as_vector(values) -> np.ndarray:
    array = np.asarray(values, dtype=np.float32)
    if array.ndim != 1:
        raise ValueError(f"expected a 1-D vector, got {array.ndim} dimensions")
    return array


def random_vector(length: int, rng: np.random.Generator | None = None) -> np.ndarray:
    """Return ``length`` float32 values drawn uniformly from [-500, 0]."""
    if length < 0:
        raise ValueError(f"invalid length {length}")
    return random_values((length,), rng)


def vector_add(a, b) -> np.ndarray:
    """Return the float32 element-wise sum of two vectors of equal length."""
    a = _as_vector(a)
    b = _as_vector(b)
    if a.shape != b.shape:
        raise ValueError(f"lengths differ: {a.size} and {b.size}")
    return a + b


def _deviations(a, b, c) -> np.ndarray:
    a = _as_vector(a)
    b = _as_vector(b)
    c = _as_vector(c)
    if not a.shape == b.shape == c.shape:
        raise ValueError(f"lengths differ: {a.size}, {b.size} and {c.size}")
    return (a + b - c).astype(np.float64)


def _wrong(a, b, c, tolerance: float) -> np.ndarray:
    deviation = _deviations(a, b, c)
    return ~(deviation * deviation < tolerance * tolerance)


def _mismatches(a, b, c, tolerance: float) -> Iterator[tuple[float, float, float, float]]:
    deviation = _deviations(a, b, c)
    wrong = ~(deviation * deviation < tolerance * tolerance)
    for index in np.flatnonzero(wrong):
        yield (
            float(deviation[index]),
            float(a[index]),
            float(b[index]),
            float(c[index]),
        )


def count_correct(a, b, c, tolerance: float = TOLERANCE) -> int:
    """Count the elements where ``c`` equals ``a + b`` within ``tolerance``.

    An element is correct when its squared deviation is strictly below the
    squared tolerance.
    """
    return int(np.count_nonzero(~_wrong(a, b, c, tolerance)))


def main(argv=None) -> int:
    """Add two random vectors, time the addition and report how many results are correct."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) == 1:
        try:
            length = int(args[0])
        except ValueError:
            print(f"invalid length: {args[0]}", file=sys.stderr)
            return 1
        if length < 0:
            print(f"invalid length: {length}", file=sys.stderr)
            return 1
    else:
        length = DEFAULT_LENGTH
        print(f"./exec length (by default length={length})")

    a = random_vector(length)
    b = random_vector(length)

    start = time.perf_counter()
    c = vector_add(a, b)
    elapsed = time.perf_counter() - start
    print(f"\nThe addition ran in {elapsed:f} seconds")

    for deviation, x, y, z in _mismatches(a, b, c, TOLERANCE):
        print(f" tmp {deviation:f} h_a {x:f} h_b {y:f} h_c {z:f} ")

    correct = count_correct(a, b, c)
    print(f"C = A+B:  {correct} out of {length} results were correct.")
    return 0 if correct == length else 1


if __name__ == "__main__":
    sys.exit(main())