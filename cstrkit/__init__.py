"""Character, byte, string, output and linked-list helpers with classic C library semantics."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "cstrings", "output", "text", "linked"]