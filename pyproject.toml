[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "thunkpool"
version = "0.1.0"
description = "A fixed-size thread pool that runs zero-argument callables in FIFO order"
requires-python = ">=3.10"
dependencies = []
keywords = ["thread pool", "threading", "semaphore", "concurrency", "worker"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
thunkpool-chunksum = "thunkpool.chunksum:main"
thunkpool-drills = "thunkpool.drills:main"

[tool.hatch.build.targets.wheel]
packages = ["thunkpool"]

[tool.hatch.build.targets.sdist]
include = ["thunkpool", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
