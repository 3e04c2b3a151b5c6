[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "phy2d"
version = "0.1.0"
description = "A small two-dimensional rigid body physics toolkit: vectors, bodies, circle collisions and integrators."
requires-python = ">=3.10"
dependencies = []
keywords = ["physics", "simulation", "2d", "collision", "integration", "vector"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["phy2d"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
