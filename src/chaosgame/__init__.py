"""Interactive chaos game fractal generator."""
__version__ = "0.1.0"
