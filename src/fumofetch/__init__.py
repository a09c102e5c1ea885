"""
Fumofetch - Terminal system information display for Linux.

Gathers host facts from /proc, /etc and helper commands and prints them
next to an ASCII-art logo.
"""

__version__ = "0.1.0"
__author__ = "Fumofetch contributors"

__all__ = ["__version__"]
