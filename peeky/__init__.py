"""Peeky: shortcut memo overlay backend."""

__version__ = "0.1.0"
