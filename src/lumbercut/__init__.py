"""One-dimensional cutting stock planner."""

__version__ = "1.0.0"
