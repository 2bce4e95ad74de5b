"""Roster - find, measure and browse the software projects under a directory."""

__version__ = "0.1.0"
