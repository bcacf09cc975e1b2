"""Bundled sound effects and sound lookup for Agent of Empires sessions."""

__version__ = "0.1.0"
