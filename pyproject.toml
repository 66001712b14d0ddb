[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "csvstream"
version = "0.1.0"
description = "Incremental, callback-driven CSV parser and field writer with strict validation"
requires-python = ">=3.10"
dependencies = []
keywords = ["csv", "parser", "streaming", "incremental", "validation"]
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
    "Topic :: Text Processing :: General",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Environment :: Console",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
csvfix = "csvstream.csvfix:main"
csvinfo = "csvstream.csvinfo:main"
csvtest = "csvstream.csvtest:main"
csvvalid = "csvstream.csvvalid:main"

[tool.hatch.build.targets.wheel]
packages = ["csvstream"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
