"""
Presentation services: frame rendering and video encoding.
"""
