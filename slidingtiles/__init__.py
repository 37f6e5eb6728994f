"""
Sliding Tiles - the 2048 merging puzzle with animated moves.
"""
__version__ = "0.1.0"
