"""Character, memory, string, text-building and file-descriptor output helpers."""

__version__ = "1.0.0"
__all__ = ["chars", "memory", "strings", "text", "output"]