"""Fixed-width vector and matrix arithmetic with wrap-around semantics."""

__version__ = "1.0.0"
__all__ = ["dtypes", "elementwise", "errors", "linalg"]