"""DJ playlist formatting utility."""

__version__ = "0.1.0"
