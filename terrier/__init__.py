"""Quick inspection of Python, Rust and JavaScript sources: fuzzy keyword search, function counts and cross-file links."""

__version__ = "0.1.0"
__all__ = ["__version__"]