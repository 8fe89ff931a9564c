[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "signaltx"
version = "0.1.0"
description = "Encode text files into bit streams and modulate them with ASK or PSK carriers"
requires-python = ">=3.10"
dependencies = []
keywords = ["modulation", "ask", "psk", "signal", "encoding", "bitstream"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
signaltx = "signaltx.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["signaltx"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
