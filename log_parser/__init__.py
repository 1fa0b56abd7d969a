"""Regex-driven log file parser."""

__version__ = "0.1.0"
