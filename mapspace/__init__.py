"""
Mapspace - bijective addressing of the tiling, loop order and spatial split
spaces of a CNN layer mapped onto a multi-level hierarchy.
"""

__version__ = "0.1.0"
