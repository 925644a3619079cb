from .parser import compose, quote, FLAG

__all__ = ["compose", "quote", "FLAG"]
