"""Knotinsert - Edit chains of cubic Bezier segments.

Knotinsert models a path made of connected cubic Bezier segments and the
editing operations performed on it: appending knots, dragging handles,
splitting a segment with De Casteljau subdivision and deleting the knot
nearest a position along the path.

Example:
    $ knotinsert new curve.json --knots 3
    $ knotinsert split curve.json --progress 0.25

This will insert a new knot a quarter of the way along the path while
keeping the shape of the curve unchanged.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
