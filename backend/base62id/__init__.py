"""Base62 encoded, time-ordered unique ids."""

__version__ = "1.0.0"
