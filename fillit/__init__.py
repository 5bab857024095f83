"""Smallest-square tetromino fitting, with supporting string, memory and list helpers."""

__version__ = "1.0.0"