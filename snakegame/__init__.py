"""
snakegame - a single-board Snake engine with a Pillow renderer.
"""

__version__ = "0.1.0"
