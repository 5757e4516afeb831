[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hostcompute"
version = "0.1.0"
description = "Host-side Canny edge detection on BMP images, plus matrix multiplication, transposition and vector addition with result checks."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["canny", "edge-detection", "bmp", "matrix", "transpose", "vector", "numpy"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Image Processing",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
hostcompute-edges = "hostcompute.edges:main"
hostcompute-matmul = "hostcompute.matrix:main"
hostcompute-transpose = "hostcompute.transpose:main"
hostcompute-vadd = "hostcompute.vadd:main"

[tool.hatch.build.targets.wheel]
packages = ["hostcompute"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
