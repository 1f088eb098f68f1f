[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cstrkit"
version = "0.1.0"
description = "Character, byte, string and linked-list helpers that follow the classic C library rules"
requires-python = ">=3.10"
dependencies = []
keywords = ["strings", "bytes", "memory", "linked-list", "atoi", "itoa", "split", "strlcpy"]
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
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["cstrkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
