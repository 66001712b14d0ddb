"""Incremental CSV parsing, field quoting and command-line tools."""

__version__ = "0.1.0"

__all__ = [
    "errors",
    "options",
    "writer",
    "parser",
    "csvfix",
    "csvinfo",
    "csvtest",
    "csvvalid",
]