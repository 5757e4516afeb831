"""Host-side Canny edge detection on BMP images, matrix multiplication, transposition and vector addition."""

__version__ = "0.1.0"
__all__ = ["bmp", "canny", "edges", "matrix", "transpose", "vadd"]