"""Bash-compatible shell built-ins, an environment table, and string, number, printf and line-reading helpers."""

__version__ = "0.1.0"

__all__ = ["builtins", "environment", "lines", "numbers", "printf", "strings"]