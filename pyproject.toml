[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "randomsurfer"
version = "0.1.0"
description = "Random-surfer simulation of page ranking over a randomly generated link graph"
requires-python = ">=3.10"
dependencies = []
keywords = ["pagerank", "random surfer", "markov chain", "simulation", "graph"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
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
test = ["pytest"]

[project.scripts]
randomsurfer-export = "randomsurfer.csv_export:main"
randomsurfer-gui = "randomsurfer.gui:main"

[tool.hatch.build.targets.wheel]
packages = ["randomsurfer"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
