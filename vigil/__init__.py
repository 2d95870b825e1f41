"""A small modal terminal text editor with vi-style key bindings."""

__version__ = "0.1.0"