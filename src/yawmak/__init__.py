"""yawmak - manage your todos from the terminal."""

__version__ = "1.2.0"
