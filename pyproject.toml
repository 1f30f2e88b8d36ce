[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "perpustakaan"
version = "0.1.0"
description = "A small library-loan manager with priority waiting queues and undo"
requires-python = ">=3.10"
dependencies = []
keywords = ["library", "loans", "queue", "stack", "linked-list", "undo"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Indonesian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
perpustakaan = "perpustakaan.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["perpustakaan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
