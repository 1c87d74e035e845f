"""Regex state-machine lexers, token types and styles for syntax highlighting."""

__version__ = "2.0.0"