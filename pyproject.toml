[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphsolve"
version = "0.1.0"
description = "Classic graph algorithms: spanning trees, shortest paths, strongly connected components, Euler tours, Hamiltonian paths and maximum flow."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "algorithms",
    "shortest-path",
    "minimum-spanning-tree",
    "union-find",
    "strongly-connected-components",
    "2-sat",
    "eulerian-path",
    "de-bruijn",
    "knights-tour",
    "max-flow",
    "min-cut",
    "bipartite-matching",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["graphsolve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
