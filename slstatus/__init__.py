"""Status monitor that composes system information into one status line."""

__version__ = "0.1.0"