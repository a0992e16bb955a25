"""Path writer for saving editor documents and SVG exports.

This module provides the PathWriter class for writing editor documents as
JSON and rendering paths to SVG files.
"""

import json
from pathlib import Path

from knotinsert.config import RenderConfig
from knotinsert.core.path import BezierPath
from knotinsert.domain import Point
from knotinsert.exceptions import SessionSaveError
from knotinsert.io.converter import EditorDocument, document_to_dict, render_svg


class PathWriter:
    """Writes editor documents and SVG renderings.

    Example:
        writer = PathWriter(Path("curve.json"))
        writer.save(EditorDocument(knots=path.knots, progress=0.5))
        PathWriter(Path("curve.svg")).save_svg(path, marker=path.point_at(0.5))
    """

    def __init__(self, output_path: Path) -> None:
        """Initialize the path writer.

        Args:
            output_path: Path where the file will be saved
        """
        self._output_path = output_path

    def _write(self, text: str) -> None:
        try:
            self._output_path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise SessionSaveError(str(self._output_path), str(e)) from e

    def save(self, document: EditorDocument) -> None:
        """Save the document as JSON.

        Raises:
            SessionSaveError: If the file cannot be written
        """
        self._write(json.dumps(document_to_dict(document), indent=2) + "\n")

    def save_svg(
        self,
        path: BezierPath,
        marker: Point | None = None,
        config: RenderConfig | None = None,
        flatten_tolerance: float | None = None,
    ) -> None:
        """Render the path and save it as an SVG file.

        Args:
            path: Path to render
            marker: Progress marker position to draw
            config: Render settings
            flatten_tolerance: Draw a flattened polyline with this tolerance

        Raises:
            SessionSaveError: If the file cannot be written
        """
        self._write(render_svg(path, marker, config, flatten_tolerance))

    @staticmethod
    def get_svg_path(input_path: Path) -> Path:
        """Generate the default SVG output path for a document.

        Converts: curve.json -> curve.svg

        Args:
            input_path: Document file path

        Returns:
            Path with .svg extension
        """
        return input_path.with_suffix(".svg")
