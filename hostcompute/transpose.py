"""Square matrix transposition: generation, transposition, checking and timing."""

from __future__ import annotations

import sys
import time

import numpy as np

DEFAULT_SIZE = 4096
_BYTES_PER_VALUE = np.dtype(np.float32).itemsize


def random_values(shape, rng: np.random.Generator | None = None) -> np.ndarray:
    """Return float32 values drawn uniformly from [-500, 0] with the given shape."""
    if rng is None:
        rng = np.random.default_rng()
    uniform = rng.random(shape).astype(np.float32)
    return (np.float32(500.0) * uniform - np.float32(500.0)).astype(np.float32)


def transpose_2d(matrix) -> np.ndarray:
    """Return a transposed copy of a 2-D matrix."""
    array = np.asarray(matrix, dtype=np.float32)
    if array.ndim != 2:
        raise ValueError(f"expected a 2-D matrix, got {array.ndim} dimensions")
    return np.ascontiguousarray(array.T)


def transpose_1d(values, n: int) -> np.ndarray:
    """Transpose an n x n matrix stored flat in row-major order; return it flat."""
    if n < 0:
        raise ValueError(f"invalid size {n}")
    flat = np.asarray(values, dtype=np.float32).ravel()
    if flat.size != n * n:
        raise ValueError(f"need {n * n} values for a {n}x{n} matrix, got {flat.size}")
    return np.ascontiguousarray(flat.reshape(n, n).T).ravel()


def check(device, host) -> bool:
    """Return True when both arrays hold exactly the same values."""
    first = np.asarray(device, dtype=np.float32).ravel()
    second = np.asarray(host, dtype=np.float32).ravel()
    if first.size != second.size:
        raise ValueError(f"sizes differ: {first.size} and {second.size}")
    return bool(np.array_equal(first, second))


def format_square(values, n: int) -> str:
    """Render an n x n flat matrix one row per line, each value as ``%3.1f`` and a space."""
    if n < 0:
        raise ValueError(f"invalid size {n}")
    flat = np.asarray(values, dtype=np.float32).ravel()
    if flat.size < n * n:
        raise ValueError(f"need {n * n} values for a {n}x{n} matrix, got {flat.size}")
    rows = flat[: n * n].reshape(n, n) if n else np.empty((0, 0), dtype=np.float32)
    return "".join("".join(f"{value:3.1f} " for value in row) + "\n" for row in rows)


def bandwidth_mb_per_s(n: int, seconds: float) -> float:
    """Megabytes per second for transposing an n x n float32 matrix in ``seconds``."""
    if seconds <= 0:
        raise ValueError(f"elapsed time must be positive, got {seconds}")
    return n * n * _BYTES_PER_VALUE / seconds / 1024 / 1024


def _timed(func, *args):
    start = time.perf_counter()
    result = func(*args)
    elapsed = max(time.perf_counter() - start, 1e-9)
    return result, elapsed


def main(argv=None) -> int:
    """Transpose a random square matrix two ways, report bandwidth and compare."""
    args = sys.argv[1:] if argv is None else list(argv)
    show = "--print" in args
    args = [arg for arg in args if arg != "--print"]

    if len(args) == 1:
        try:
            n = int(args[0])
        except ValueError:
            print(f"invalid size: {args[0]}", file=sys.stderr)
            return 1
        if n < 0:
            print(f"invalid size: {n}", file=sys.stderr)
            return 1
    elif not args:
        n = DEFAULT_SIZE
        print(f"./exec n (by default n={n})")
    else:
        print("usage: transpose [n] [--print]", file=sys.stderr)
        return 1

    matrix = random_values((n, n))

    trans_2d, seconds_2d = _timed(transpose_2d, matrix)
    print(f"Transpose version 2D: {bandwidth_mb_per_s(n, seconds_2d):f} MB/s")

    trans_1d, seconds_1d = _timed(transpose_1d, matrix.ravel(), n)
    print(f"Transpose version 1D: {bandwidth_mb_per_s(n, seconds_1d):f} MB/s")

    if not check(trans_1d, trans_2d):
        print("\n\nTranspose versions differ!!")
        return 1

    if show:
        print(format_square(trans_2d, n), end="")
        print("\n-------------------------")
        print(format_square(trans_1d, n), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())