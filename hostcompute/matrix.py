"""Dense matrix helpers: initialisation, product, check and printing."""

from __future__ import annotations

import sys

import numpy as np

USAGE = "usage: matrix hA hB/wA wB [--print]"
DEFAULT_TOLERANCE = 1e-5


class MatrixMismatch(AssertionError):
    """Raised when a computed product differs from the reference product."""

    def __init__(self, row: int, col: int, expected: float, actual: float):
        self.row = row
        self.col = col
        self.expected = expected
        self.actual = actual
        super().__init__(f"[{row},{col}]: {expected:f}!={actual:f}")


def _as_matrix(m) -> np.ndarray:
    array = np.asarray(m, dtype=np.float32)
    if array.ndim != 2:
        raise ValueError(f"expected a 2-D matrix, got {array.ndim} dimensions")
    return array


def init_matrix(rows: int, cols: int, k: float, off_diagonal: float | None = None) -> np.ndarray:
    """Build a rows x cols float32 matrix with k on the diagonal.

    Every other element is ``off_diagonal``; when that is None it is
    ``-1 / cols``.
    """
    if rows < 0 or cols < 0:
        raise ValueError(f"invalid dimensions {rows}x{cols}")
    if off_diagonal is None:
        fill = np.float32(-1.0) / np.float32(cols) if cols else np.float32(0.0)
    else:
        fill = np.float32(off_diagonal)
    matrix = np.full((rows, cols), fill, dtype=np.float32)
    np.fill_diagonal(matrix, np.float32(k))
    return matrix


def multiply(a, b) -> np.ndarray:
    """Return the float32 product of two matrices."""
    a = _as_matrix(a)
    b = _as_matrix(b)
    if a.shape[1] != b.shape[0]:
        raise ValueError(f"cannot multiply {a.shape} by {b.shape}")
    return np.matmul(a, b)


def transpose_matrix(m) -> np.ndarray:
    """Return a transposed copy of a matrix."""
    return np.ascontiguousarray(_as_matrix(m).T)


def diff(a, b, c, tolerance: float = DEFAULT_TOLERANCE) -> None:
    """Check that ``c`` equals ``a @ b`` within ``tolerance``.

    Raises MatrixMismatch for the first differing element in row-major order.
    """
    reference = multiply(a, b)
    c = _as_matrix(c)
    if c.shape != reference.shape:
        raise ValueError(f"result has shape {c.shape}, expected {reference.shape}")
    bad = np.argwhere(np.abs(reference - c) > tolerance)
    if bad.size:
        row, col = (int(x) for x in bad[0])
        raise MatrixMismatch(row, col, float(reference[row, col]), float(c[row, col]))


def format_matrix(m) -> str:
    """Render a matrix one row per line, each value as ``%4.1f`` and a space."""
    return "".join(
        "".join(f"{value:4.1f} " for value in row) + "\n" for row in _as_matrix(m)
    )


def main(argv=None) -> int:
    """Multiply two generated matrices and verify the result."""
    args = sys.argv[1:] if argv is None else list(argv)
    show = "--print" in args
    args = [arg for arg in args if arg != "--print"]
    if len(args) != 3:
        print(USAGE)
        return 1
    try:
        h_a, w_a, w_b = (int(arg) for arg in args)
    except ValueError:
        print(USAGE)
        return 1
    if min(h_a, w_a, w_b) < 0:
        print(USAGE)
        return 1

    a = init_matrix(h_a, w_a, 1.0)
    b = init_matrix(w_a, w_b, 2.0)
    c = multiply(a, b)

    if show:
        print("\n\nMATRIX A")
        print(format_matrix(a), end="")
        print("\n\nMATRIX B")
        print(format_matrix(b), end="")
        print("\n\nMATRIX C")
        print(format_matrix(c), end="")

    try:
        diff(a, b, c)
    except MatrixMismatch as exc:
        print(exc)
        print("ERROR=GPU.vs.CPU matrix mult differs")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())