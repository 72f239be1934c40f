[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fieldsim"
version = "0.1.0"
description = "Building blocks for a small-size robot soccer field: Voronoi graph types and path search, a field scene model, UDP vision transport and simulator control helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["robotics", "robot soccer", "simulation", "voronoi", "path planning", "quaternion"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Scientific/Engineering",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fieldsim"]

[tool.pytest.ini_options]
addopts = "-ra"
