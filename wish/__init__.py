"""Test check helpers, sequence matching and line diffs, tab indentation tools, and a plain-text fixture file format."""

__version__ = "0.1.0"