import struct

import numpy as np
import pytest

from hostcompute.bmp import BmpError, BmpImage, read_bmp, rgb_to_gray, write_bmp


def _make_header(width, height, image_size, *, magic=b"BM", offset=54, bpp=24, compression=0):
    header = bytearray(54)
    header[0:2] = magic
    struct.pack_into("<i", header, 2, 54 + image_size)
    struct.pack_into("<i", header, 10, offset)
    struct.pack_into("<i", header, 14, 40)
    struct.pack_into("<ii", header, 18, width, height)
    struct.pack_into("<h", header, 26, 1)
    struct.pack_into("<h", header, 28, bpp)
    struct.pack_into("<i", header, 30, compression)
    struct.pack_into("<i", header, 34, image_size)
    return bytes(header)


def _write_file(path, width, height, data, **kwargs):
    path.write_bytes(_make_header(width, height, len(data), **kwargs) + data)
    return path


def test_read_round_trip(tmp_path):
    data = bytes(range(2 * 2 * 3))
    path = _write_file(tmp_path / "a.bmp", 2, 2, data)
    image = read_bmp(path)
    assert isinstance(image, BmpImage)
    assert (image.width, image.height) == (2, 2)
    assert image.pixels == data
    assert image.image_size == len(data)
    assert image.header == path.read_bytes()[:54]


def test_too_small(tmp_path):
    path = tmp_path / "tiny.bmp"
    path.write_bytes(b"BM" + b"\x00" * 10)
    with pytest.raises(BmpError):
        read_bmp(path)


def test_not_bmp(tmp_path):
    path = _write_file(tmp_path / "x.bmp", 1, 1, b"\x00" * 3, magic=b"XX")
    with pytest.raises(BmpError):
        read_bmp(path)


def test_wrong_bit_depth(tmp_path):
    path = _write_file(tmp_path / "x.bmp", 1, 1, b"\x00" * 4, bpp=32)
    with pytest.raises(BmpError):
        read_bmp(path)


def test_compression_rejected(tmp_path):
    path = _write_file(tmp_path / "x.bmp", 1, 1, b"\x00" * 3, compression=1)
    with pytest.raises(BmpError):
        read_bmp(path)


def test_empty_image_rejected(tmp_path):
    path = _write_file(tmp_path / "x.bmp", 0, 0, b"")
    with pytest.raises(BmpError):
        read_bmp(path)


def test_trailing_bytes_rejected(tmp_path):
    path = tmp_path / "x.bmp"
    path.write_bytes(_make_header(1, 1, 3) + b"\x00" * 4)
    with pytest.raises(BmpError):
        read_bmp(path)


def test_short_data_rejected(tmp_path):
    path = tmp_path / "x.bmp"
    path.write_bytes(_make_header(2, 2, 12) + b"\x00" * 5)
    with pytest.raises(BmpError):
        read_bmp(path)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_bmp(tmp_path / "missing.bmp")


@pytest.mark.parametrize(
    "pixel, expected",
    [((1, 0, 0), 0.2989), ((0, 1, 0), 0.5870), ((0, 0, 1), 0.1140)],
)
def test_gray_coefficients(pixel, expected):
    gray = rgb_to_gray(bytes(pixel), 1, 1)
    assert gray.shape == (1, 1)
    assert gray[0, 0] == pytest.approx(expected, rel=1e-6)


def test_gray_shape_and_black():
    gray = rgb_to_gray(b"\x00" * 18, 3, 2)
    assert gray.shape == (2, 3)
    assert gray.dtype == np.float32
    assert not gray.any()


def test_gray_too_few_bytes():
    with pytest.raises(ValueError):
        rgb_to_gray(b"\x00" * 5, 2, 1)


def test_write_then_read(tmp_path):
    header = _make_header(2, 2, 12)
    gray = np.array([[0, 255], [255, 0]], dtype=np.float32)
    out = tmp_path / "out.bmp"
    write_bmp(out, gray, header)
    image = read_bmp(out)
    assert image.header == header
    assert image.pixels == bytes([0, 0, 0, 255, 255, 255, 255, 255, 255, 0, 0, 0])


def test_write_pads_to_declared_size(tmp_path):
    header = _make_header(2, 2, 16)
    out = tmp_path / "out.bmp"
    write_bmp(out, np.full((2, 2), 255, dtype=np.float32), header)
    content = out.read_bytes()
    assert len(content) == 54 + 16
    assert content[54 + 12:] == b"\x00" * 4