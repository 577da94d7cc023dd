"""Live departure board for two adjacent TfL stations."""

__version__ = "0.1.0"
