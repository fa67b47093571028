[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "heapsim"
version = "0.1.0"
description = "A simulated first-fit heap allocator with malloc, calloc, realloc and free, plus data structures built on it"
requires-python = ">=3.10"
dependencies = []
keywords = ["malloc", "allocator", "heap", "memory", "simulation", "teaching"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
heapsim-list = "heapsim.linked_list:main"
heapsim-matrix = "heapsim.matrix:main"
heapsim-array = "heapsim.dynamic_array:main"

[tool.hatch.build.targets.wheel]
packages = ["heapsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
