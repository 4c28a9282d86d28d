"""Language-agnostic structural outlines of source files."""

__version__ = "0.1.0"
