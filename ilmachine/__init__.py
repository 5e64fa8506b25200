"""An accumulator machine, a stack machine, and small array, list and text utilities."""

__version__ = "0.1.0"