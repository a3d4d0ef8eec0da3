[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "softseqheap"
version = "0.1.0"
description = "Soft sequence heaps with approximate extract-min, meld, selection and sorting by witnesses"
requires-python = ">=3.10"
dependencies = []
keywords = ["soft heap", "soft sequence heap", "priority queue", "selection", "sorting", "data structures"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
softseqheap-demo = "softseqheap.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["softseqheap"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
