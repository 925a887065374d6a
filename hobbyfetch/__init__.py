"""Fetch the hobbies endpoint and print the derived line."""

__version__ = "0.1.0"
