[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oopsim"
version = "0.1.0"
description = "A small discrete-event network simulator and a set of geometric shape classes"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "discrete-event", "network", "packets", "shapes", "geometry"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
oopsim = "oopsim.cli:main"
oopsim-shapes = "oopsim.shapes:main"

[tool.hatch.build.targets.wheel]
packages = ["oopsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
