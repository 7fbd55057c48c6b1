"""tagdo - todo and label API with swappable repository backends."""

__version__ = "0.1.0"
