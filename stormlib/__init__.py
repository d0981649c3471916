"""C-style strings, hashing, UTF-8, big integers, intrusive containers and threading primitives."""

__version__ = "0.1.0"