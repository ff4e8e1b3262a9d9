[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "commonkit"
version = "0.1.0"
description = "Small utilities: colour and key tables, hex and base64 codecs, WELL512 PRNG, elliptic-curve ECDH/ECDSA, a FIFO, observers and a 5x8 bitmap font"
requires-python = ">=3.10"
dependencies = []
keywords = ["utilities", "base64", "hex", "ecdsa", "ecdh", "prng", "well512", "fifo", "observer", "font"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["commonkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
