"""Sermon Export - convert sermon plan outlines into office documents."""

__version__ = "0.1.0"
