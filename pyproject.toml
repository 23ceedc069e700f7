[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "reattore"
version = "0.1.0"
description = "A fission reactor simulation in simulated time: atoms split or decay, a feeder adds fuel, an activator triggers fissions and an optional inhibitor absorbs energy."
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "reactor", "fission", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
reattore = "reattore.master:main"

[tool.hatch.build.targets.wheel]
packages = ["reattore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
