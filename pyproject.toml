[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "warehouse_sim"
version = "0.1.0"
description = "Discrete-event simulation of package routing through a network of warehouses"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "discrete-event", "logistics", "warehouse", "routing"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
warehouse-sim = "warehouse_sim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["warehouse_sim"]

[tool.pytest.ini_options]
addopts = "-ra"
