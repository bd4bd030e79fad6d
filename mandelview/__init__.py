"""Interactive Mandelbrot set viewer with four interchangeable escape-count renderers."""

__version__ = "0.1.0"