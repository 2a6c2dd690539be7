"""Two-stack integer sorting that reports the stack operations it uses."""

__version__ = "1.0.0"