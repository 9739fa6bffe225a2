"""Ping API demonstrating per-request log ids carried through async code."""

__version__ = "0.1.0"
