[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "halmath"
version = "1.0.0"
description = "Fixed-width integer and float32 vector and matrix arithmetic with wrap-around semantics"
requires-python = ">=3.10"
dependencies = []
keywords = ["vector", "matrix", "fixed-width", "integer", "arithmetic", "dot product", "wraparound"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["halmath"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
