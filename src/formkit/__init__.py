"""formkit — relative-time labels and form field validators."""

__version__ = "0.1.0"
