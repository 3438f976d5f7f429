[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "gosyncdemos"
version = "0.1.0"
description = "Hand-built synchronisation primitives and a collection of small concurrency pattern demos"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "concurrency",
    "threading",
    "semaphore",
    "barrier",
    "rwlock",
    "pipeline",
    "fan-in",
    "fork-join",
    "worker-pool",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools]
packages = ["gosyncdemos"]

[tool.pytest.ini_options]
addopts = "-ra"
