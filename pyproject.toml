[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "goldilocks_verifier"
version = "0.1.0"
description = "Goldilocks field arithmetic, an optimized Poseidon sponge and the data model of PLONK/FRI proofs"
requires-python = ">=3.10"
dependencies = []
keywords = ["goldilocks", "poseidon", "plonk", "fri", "zero-knowledge", "proof"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["goldilocks_verifier"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
