"""Reading and writing uncompressed 24-bit BMP images."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from os import PathLike
from typing import Union

import numpy as np

HEADER_SIZE = 54
MAX_IMAGE_SIZE = 0x3000000

_Path = Union[str, "PathLike[str]"]


class BmpError(ValueError):
    """Raised when a file is not a BMP image this module can handle."""


@dataclass(frozen=True)
class BmpImage:
    """A BMP image: its raw 54-byte header, dimensions and pixel bytes."""

    header: bytes
    width: int
    height: int
    pixels: bytes

    @property
    def image_size(self) -> int:
        """Size of the pixel data as declared by the header."""
        return _declared_image_size(self.header)


def _declared_image_size(header: bytes) -> int:
    (file_size,) = struct.unpack_from("<i", header, 2)
    return file_size - HEADER_SIZE


def read_bmp(path: _Path) -> BmpImage:
    """Read an uncompressed 24-bit BMP file."""
    with open(path, "rb") as stream:
        header = stream.read(HEADER_SIZE)
        if len(header) != HEADER_SIZE:
            raise BmpError(f"input too small ({len(header)} bytes)")
        if header[:2] != b"BM":
            raise BmpError("not a BMP file")

        image_size = _declared_image_size(header)
        if image_size <= 0 or image_size > MAX_IMAGE_SIZE:
            raise BmpError(f"image too large: {image_size} bytes")

        (offset,) = struct.unpack_from("<i", header, 10)
        (bits_per_pixel,) = struct.unpack_from("<h", header, 28)
        if offset != HEADER_SIZE or bits_per_pixel != 24:
            raise BmpError("not a 24-bit colour image")

        (compression,) = struct.unpack_from("<i", header, 30)
        if compression != 0:
            raise BmpError("compression not supported")

        width, height = struct.unpack_from("<ii", header, 18)

        pixels = stream.read(image_size + 1)
        if len(pixels) != image_size:
            raise BmpError(
                f"file size incorrect: {len(pixels)} bytes read instead of {image_size}"
            )

    return BmpImage(header=header, width=width, height=height, pixels=pixels)


def write_bmp(path: _Path, gray, header: bytes) -> None:
    """Write a grey-level image as a 24-bit BMP using an existing header.

    Each grey value is stored in all three colour channels. The pixel data
    is cut or zero-padded to the size the header declares.
    """
    header = bytes(header)
    if len(header) != HEADER_SIZE:
        raise BmpError(f"header must be {HEADER_SIZE} bytes, got {len(header)}")
    image_size = _declared_image_size(header)
    if image_size < 0:
        raise BmpError(f"invalid image size in header: {image_size}")

    values = np.clip(np.asarray(gray, dtype=np.float64).ravel(), 0, 255)
    channels = np.repeat(values.astype(np.uint8), 3).tobytes()
    data = channels[:image_size].ljust(image_size, b"\x00")

    with open(path, "wb") as stream:
        stream.write(header)
        stream.write(data)


def rgb_to_gray(pixels, width: int, height: int) -> np.ndarray:
    """Convert packed 3-byte pixels to a (height, width) float32 luminance array."""
    if width < 0 or height < 0:
        raise ValueError(f"invalid dimensions {width}x{height}")
    needed = 3 * width * height
    data = np.frombuffer(bytes(pixels), dtype=np.uint8)
    if data.size < needed:
        raise ValueError(f"need {needed} bytes of pixel data, got {data.size}")
    rgb = data[:needed].reshape(height, width, 3).astype(np.float64)
    gray = 0.2989 * rgb[..., 0] + 0.5870 * rgb[..., 1] + 0.1140 * rgb[..., 2]
    return gray.astype(np.float32)