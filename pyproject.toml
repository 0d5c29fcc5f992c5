[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pushswap"
version = "0.1.0"
description = "Sort integers using two stacks and a restricted instruction set, printing the instructions"
requires-python = ">=3.10"
dependencies = []
keywords = ["push_swap", "sorting", "stacks", "puzzle", "algorithm"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
push-swap = "pushswap.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pushswap"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
