"""Small building blocks: characters, numbers, memory, strings, output, printf, lines and linked lists."""

__version__ = "0.1.0"
__all__ = ["chars", "numbers", "memory", "strings", "output", "printf", "lines", "linked"]