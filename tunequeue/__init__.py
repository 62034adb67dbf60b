"""Playback-reference core for the tunequeue music client."""

__version__ = "0.1.0"
