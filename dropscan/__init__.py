"""dropscan - score, filter and rank dropping domain lists."""

__version__ = "0.1.0"
