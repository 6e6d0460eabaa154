"""Eldar core: local credential/config store and page navigation."""

__version__ = "0.1.0"
