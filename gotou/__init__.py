"""
GoToU: Hong Kong severe weather class suspension status.
"""

__version__ = "0.1.0"
