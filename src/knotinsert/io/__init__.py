"""File I/O layer for knotinsert.

This module handles reading and writing path documents and rendering
paths to SVG. It keeps the file formats out of the core editing model.

Key responsibilities:
- Load and validate JSON path documents
- Save editor state (knots and progress marker)
- Export the editor view as SVG using fontTools pens

Key classes:
- PathReader: Load path documents
- PathWriter: Save path documents and SVG renderings
- EditorDocument: Knots plus progress marker
"""

from knotinsert.io.converter import EditorDocument
from knotinsert.io.reader import PathReader
from knotinsert.io.writer import PathWriter

__all__ = [
    "EditorDocument",
    "PathReader",
    "PathWriter",
]
