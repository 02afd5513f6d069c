"""Stella Relay - real-time English/Spanish interpreter for phone calls."""

__version__ = "0.1.0"
