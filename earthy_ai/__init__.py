"""Earthy AI: conversational request router for service businesses."""

__version__ = "1.0.0"
