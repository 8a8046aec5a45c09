[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cokit"
version = "0.1.0"
description = "Small building blocks: hexdump, a tiny logger, chainable generators, value wrappers, a red-black tree, buffered async streams and asyncio combinators"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "hexdump",
    "logging",
    "generator",
    "optional",
    "variant",
    "red-black tree",
    "arena",
    "streams",
    "asyncio",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Framework :: AsyncIO",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
cokit-hexdump = "cokit.hexdump:main"

[tool.hatch.build.targets.wheel]
packages = ["cokit"]

[tool.hatch.build.targets.sdist]
include = ["cokit", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
