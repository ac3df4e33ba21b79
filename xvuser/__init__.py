"""Unix-style user utilities, a shell command parser, a free-list allocator and binary layout helpers."""

__version__ = "0.1.0"