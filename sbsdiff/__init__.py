"""sbsdiff - side-by-side text comparison."""

__version__ = "0.1.0"
