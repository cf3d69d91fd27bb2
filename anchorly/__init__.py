"""Anchorly - credential and session-token core for the bookmarking service."""

__version__ = "0.1.0"
