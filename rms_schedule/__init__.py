"""Current RMS schedule proxy."""

__version__ = "0.1.0"
