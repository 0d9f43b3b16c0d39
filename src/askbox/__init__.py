"""
askbox: a terminal front-end for a remote text-generation endpoint.
"""

__version__ = "0.1.0"
