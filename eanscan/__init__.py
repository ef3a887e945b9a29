"""
EAN-13 scanline decoding.
"""

__version__ = "0.1.0"
