[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bagsort"
version = "0.1.0"
description = "A linked bag container with merge sort and quicksort over singly linked chains, plus an integer recurrence sequence"
requires-python = ">=3.10"
dependencies = []
keywords = ["bag", "linked list", "merge sort", "quicksort", "data structures", "recurrence"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bagsort-series = "bagsort.series:main"
bagsort-listsort = "bagsort.linked_list_sort:main"
bagsort-demo = "bagsort.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["bagsort"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
