[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "indexbench"
version = "0.1.0"
description = "B+ tree and chained hash table indexes with probe counting, plus small benchmark commands"
requires-python = ">=3.10"
dependencies = []
keywords = ["b+ tree", "hash table", "index", "data structures", "benchmark"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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
test = ["pytest"]

[project.scripts]
indexbench = "indexbench.cli:main"
indexbench-bplus-int = "indexbench.cli:bplus_int_main"
indexbench-bplus-string = "indexbench.cli:bplus_string_main"
indexbench-hash-int = "indexbench.cli:hashtable_int_main"
indexbench-hash-string = "indexbench.cli:hashtable_string_main"

[tool.hatch.build.targets.wheel]
packages = ["indexbench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
