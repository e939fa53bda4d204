[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dspbench"
version = "0.1.0"
description = "Sample-by-sample FIR, IIR and LMS filters with a Gray-coded QPSK modem"
requires-python = ">=3.10"
dependencies = []
keywords = ["dsp", "filter", "fir", "iir", "biquad", "lms", "adaptive", "qpsk", "modem"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
    "Topic :: Communications",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dspbench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
