"""Command line tool: detect edges in a 24-bit BMP image."""

from __future__ import annotations

import sys
import time

import numpy as np

from hostcompute.bmp import BmpError, read_bmp, rgb_to_gray, write_bmp
from hostcompute.canny import canny

LEVEL = 1000.0
USAGE = "usage: edges input.bmp output.bmp [cg]"


def main(argv=None) -> int:
    """Read a BMP, run edge detection as selected by the mode, write the result."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 3:
        print(USAGE, file=sys.stderr)
        return 1
    source, target, mode = args[:3]

    try:
        image = read_bmp(source)
        gray = rgb_to_gray(image.pixels, image.width, image.height)
    except (OSError, BmpError, ValueError) as exc:
        print(f"{source}: {exc}", file=sys.stderr)
        return 1

    print(
        f"Image read correctly (width={image.width} height={image.height}, "
        f"imagesize={image.image_size})."
    )

    output = np.zeros_like(gray)
    if mode.startswith("c"):
        start = time.perf_counter()
        output = canny(gray, LEVEL)
        elapsed = time.perf_counter() - start
        print(f"CPU execution time {elapsed * 1000:f} ms.")
    else:
        print("Not implemented yet!")

    try:
        write_bmp(target, output, image.header)
    except (OSError, BmpError) as exc:
        print(f"{target}: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())