"""Console roster manager for students and teachers."""

__version__ = "0.1.0"
