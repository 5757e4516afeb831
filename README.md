# hostcompute

Reference implementations of a few classic compute workloads, built on
NumPy and run on the host:

- Canny edge detection on uncompressed 24-bit BMP images
- dense matrix multiplication with a verification pass
- square matrix transposition, with a throughput estimate
- element-wise vector addition with a tolerance check

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

Every command exits with status 0 on success and 1 on a usage error or a
failed check.

### Edge detection

```
hostcompute-edges input.bmp output.bmp c
```

Reads a 24-bit uncompressed BMP, converts it to grey
(`0.2989 R + 0.5870 G + 0.1140 B`), runs the Canny pipeline with a
threshold level of 1000 and writes the edge map (0 or 255 in every
channel) as a BMP that reuses the input's header. It prints the image
size after reading and the time the detection took.

The third argument selects the implementation. Only `c` (run on the host)
is available; any other value prints `Not implemented yet!` and writes an
all-black image.

### Matrix multiplication

```
hostcompute-matmul hA wA wB [--print]
```

Builds an `hA x wA` matrix with 1 on the diagonal and a `wA x wB` matrix
with 2 on the diagonal (every other element is `-1 / columns`),
multiplies them and checks the product against a reference. With
`--print` the three matrices are printed. On a mismatch the first
differing element is reported.

### Transposition

```
hostcompute-transpose [n] [--print]
```

Transposes a random `n x n` matrix (4096 by default, values in
`[-500, 0]`) once as a 2-D array and once as a flat row-major array,
reports the throughput of each in MB/s and checks that both results are
identical. With `--print` both transposed matrices are printed.

### Vector addition

```
hostcompute-vadd [length]
```

Adds two random vectors (1024 elements by default, values in
`[-500, 0]`), prints the time the addition took, lists any element whose
squared deviation is not below `0.001²`, and reports how many results
were correct.

## Library use

```python
from hostcompute.bmp import read_bmp, write_bmp, rgb_to_gray
from hostcompute.canny import canny

image = read_bmp("input.bmp")
gray = rgb_to_gray(image.pixels, image.width, image.height)
edges = canny(gray, 1000.0)
write_bmp("edges.bmp", edges, image.header)
```

- `hostcompute.bmp`: `read_bmp` returns a `BmpImage` (`header`, `width`,
  `height`, `pixels`, `image_size`) and raises `BmpError` for files that
  are too small, not BMP, not 24-bit, compressed, or of the wrong size.
  `write_bmp` writes a grey image with a given 54-byte header;
  `rgb_to_gray` converts packed pixels to a `(height, width)` float32 array.
- `hostcompute.canny`: the stages `noise_reduction`, `gradient`
  (returns `gx, gy, magnitude, direction`), `non_max_suppression` and
  `hysteresis`, and `canny` which runs them all.
- `hostcompute.matrix`: `init_matrix`, `multiply`, `transpose_matrix`,
  `format_matrix`, and `diff`, which raises `MatrixMismatch` when `c`
  differs from `a @ b` beyond the tolerance.
- `hostcompute.transpose`: `random_values`, `transpose_2d`,
  `transpose_1d`, `check`, `format_square` and `bandwidth_mb_per_s`.
- `hostcompute.vadd`: `random_vector`, `vector_add` and `count_correct`.

## What this package does not do

Everything runs on the host with NumPy. There is no GPU or OpenCL
backend: no device selection, no device information listing, and no
device-side kernels to compare against. The edge-detection command's
non-`c` modes are therefore not implemented.