"""Two-stack machine with push, swap and rotate instructions, small-stack
sorting, and helpers for numbers, characters, strings, byte buffers,
linked chains and printf-style formatting."""

__version__ = "0.1.0"