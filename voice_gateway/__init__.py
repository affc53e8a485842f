"""Multi-provider voice agent gateway."""

__version__ = "1.0.0"
