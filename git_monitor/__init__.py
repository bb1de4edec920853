"""Git Monitor: a read-only dashboard of working directory sync state."""

__version__ = "1.0.0"
