[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "utilkit"
version = "0.1.0"
description = "Small generic helpers: sequence set operations, JSON and encrypted column values, thread-safe containers and tree building."
requires-python = ">=3.10"
keywords = [
    "utilities",
    "collections",
    "set-operations",
    "json-column",
    "encryption",
    "aes-gcm",
    "tree",
    "thread-safe",
]
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
    "Typing :: Typed",
]
dependencies = [
    "cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["utilkit"]

[tool.hatch.build.targets.sdist]
include = [
    "utilkit",
    "tests",
    "README.md",
    "pyproject.toml",
]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
