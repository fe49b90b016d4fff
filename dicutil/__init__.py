"""Copy-on-write integer arrays and Fx hashing for binary dictionary data."""

__version__ = "0.1.0"
__all__ = ["cow_array", "fxhash"]