"""Canny edge detection on grey-level images."""

from __future__ import annotations

import numpy as np

_GAUSSIAN = np.array(
    [
        [2, 4, 5, 4, 2],
        [4, 9, 12, 9, 4],
        [5, 12, 15, 12, 5],
        [4, 9, 12, 9, 4],
        [2, 4, 5, 4, 2],
    ],
    dtype=np.float64,
)
_GAUSSIAN_SUM = 159.0

_SOBEL_X = np.array(
    [
        [1, 2, 0, -2, -1],
        [4, 8, 0, -8, -4],
        [6, 12, 0, -12, -6],
        [4, 8, 0, -8, -4],
        [1, 2, 0, -2, -1],
    ],
    dtype=np.float64,
)

_SOBEL_Y = np.array(
    [
        [-1, -4, -6, -4, -1],
        [-2, -8, -12, -8, -2],
        [0, 0, 0, 0, 0],
        [2, 8, 12, 8, 2],
        [1, 4, 6, 4, 1],
    ],
    dtype=np.float64,
)

_PI = np.float32(3.141593)
_EIGHTH = _PI / np.float32(8)


def _as_image(image) -> np.ndarray:
    array = np.asarray(image, dtype=np.float32)
    if array.ndim != 2:
        raise ValueError(f"expected a 2-D image, got {array.ndim} dimensions")
    return array


def _correlate5(src: np.ndarray, kernel: np.ndarray, divisor: float = 1.0) -> np.ndarray:
    """Apply a 5x5 kernel to every pixel at least two pixels from the border."""
    height, width = src.shape
    out = np.zeros((height, width), dtype=np.float32)
    if height < 5 or width < 5:
        return out
    values = src.astype(np.float64)
    acc = np.zeros((height - 4, width - 4), dtype=np.float64)
    for (di, dj), weight in np.ndenumerate(kernel):
        if weight:
            acc += weight * values[di : di + height - 4, dj : dj + width - 4]
    out[2:-2, 2:-2] = acc / divisor
    return out


def _interior(array: np.ndarray, margin: int, di: int = 0, dj: int = 0) -> np.ndarray:
    height, width = array.shape
    return array[margin + di : height - margin + di, margin + dj : width - margin + dj]


def noise_reduction(image) -> np.ndarray:
    """Smooth an image with the 5x5 Gaussian kernel; the 2-pixel border is zero."""
    return _correlate5(_as_image(image), _GAUSSIAN, _GAUSSIAN_SUM)


def gradient(smoothed):
    """Return (gx, gy, magnitude, direction) of a smoothed image.

    The direction is quantised to 0, 45, 90 or 135 degrees.
    """
    smoothed = _as_image(smoothed)
    gx = _correlate5(smoothed, _SOBEL_X)
    gy = _correlate5(smoothed, _SOBEL_Y)
    magnitude = np.sqrt(gx * gx + gy * gy).astype(np.float32)
    angle = np.abs(np.arctan2(np.abs(gy), np.abs(gx))).astype(np.float32)
    direction = np.select(
        [
            angle <= _EIGHTH,
            angle <= 3 * _EIGHTH,
            angle <= 5 * _EIGHTH,
            angle <= 7 * _EIGHTH,
        ],
        [0, 45, 90, 135],
        default=0,
    ).astype(np.float32)
    return gx, gy, magnitude, direction


def non_max_suppression(magnitude, direction) -> np.ndarray:
    """Mark pixels whose magnitude is a local maximum across the edge."""
    magnitude = _as_image(magnitude)
    direction = _as_image(direction)
    if magnitude.shape != direction.shape:
        raise ValueError("magnitude and direction must have the same shape")
    edges = np.zeros(magnitude.shape, dtype=bool)
    height, width = magnitude.shape
    if height < 7 or width < 7:
        return edges

    centre = _interior(magnitude, 3)
    angle = _interior(direction, 3)

    def greater(di: int, dj: int) -> np.ndarray:
        return centre > _interior(magnitude, 3, di, dj)

    edges[3:-3, 3:-3] = (
        ((angle == 0) & greater(0, 1) & greater(0, -1))
        | ((angle == 45) & greater(1, 1) & greater(-1, -1))
        | ((angle == 90) & greater(1, 0) & greater(-1, 0))
        | ((angle == 135) & greater(1, -1) & greater(-1, 1))
    )
    return edges


def hysteresis(magnitude, edges, level: float) -> np.ndarray:
    """Keep strong edges and weak edges that touch a strong pixel; 255 marks an edge."""
    magnitude = _as_image(magnitude)
    edges = np.asarray(edges).astype(bool)
    if magnitude.shape != edges.shape:
        raise ValueError("magnitude and edges must have the same shape")
    out = np.zeros(magnitude.shape, dtype=np.float32)
    height, width = magnitude.shape
    if height < 7 or width < 7:
        return out

    low = np.float32(level) / np.float32(2)
    high = np.float32(2) * np.float32(level)

    centre = _interior(magnitude, 3)
    marked = _interior(edges, 3)
    strong_neighbour = np.zeros(centre.shape, dtype=bool)
    for di in (-1, 0, 1):
        for dj in (-1, 0, 1):
            strong_neighbour |= _interior(magnitude, 3, di, dj) > high

    strong = marked & (centre > high)
    weak = marked & (centre >= low) & (centre < high) & strong_neighbour
    out[3:-3, 3:-3][strong | weak] = 255
    return out


def canny(image, level: float = 1000.0) -> np.ndarray:
    """Run the full Canny pipeline and return an image of 0 and 255 values."""
    smoothed = noise_reduction(image)
    _, _, magnitude, direction = gradient(smoothed)
    edges = non_max_suppression(magnitude, direction)
    return hysteresis(magnitude, edges, level)