"""ASCII character classes, integer parsing, string and buffer helpers, line reading and printf."""

__version__ = "0.1.0"
__all__ = ["ctype", "numbers", "memory", "strings", "output", "reader", "printf"]