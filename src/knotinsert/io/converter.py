"""Converters between domain models, documents and drawing output.

This module handles:
- Conversion between editor documents and plain dictionaries (JSON files)
- Drawing a BezierPath into any fontTools pen
- SVG path data and full SVG rendering of the editor view
"""

from dataclasses import dataclass, field
from typing import Any

from fontTools.misc.bezierTools import approximateCubicArcLength
from fontTools.pens.basePen import AbstractPen
from fontTools.pens.boundsPen import ControlBoundsPen
from fontTools.pens.svgPathPen import SVGPathPen

from knotinsert.config import RenderConfig
from knotinsert.core.path import BezierPath
from knotinsert.domain import Knot, Point
from knotinsert.exceptions import SessionFormatError

DOCUMENT_FORMAT = "knotinsert-path"
DOCUMENT_VERSION = 1

# Editor view colors
CURVE_COLOR = "red"
ANCHOR_COLOR = "red"
CONTROL_COLOR = "green"
CONTROL_LINE_COLOR = "gray"
MARKER_COLOR = "blue"


@dataclass
class EditorDocument:
    """Persisted editor state: the path and the progress marker.

    Attributes:
        knots: Knots of the path in order
        progress: Progress marker value, or None if unset
    """

    knots: list[Knot] = field(default_factory=list)
    progress: float | None = None

    def to_path(self) -> BezierPath:
        """Build a BezierPath from the document's knots."""
        return BezierPath(self.knots)


def document_to_dict(document: EditorDocument) -> dict[str, Any]:
    """Convert an editor document to a JSON-ready dictionary.

    Args:
        document: Document to convert

    Returns:
        Dictionary with format, version, knots and progress keys
    """
    return {
        "format": DOCUMENT_FORMAT,
        "version": DOCUMENT_VERSION,
        "progress": document.progress,
        "knots": [knot.to_dict() for knot in document.knots],
    }


def dict_to_document(data: Any, source: str = "<memory>") -> EditorDocument:
    """Convert a dictionary loaded from JSON to an editor document.

    Args:
        data: Parsed JSON content
        source: Name of the file the data came from, for error messages

    Returns:
        EditorDocument instance

    Raises:
        SessionFormatError: If the data is not a valid path document
    """
    if not isinstance(data, dict):
        raise SessionFormatError(source, "top level must be an object")
    if data.get("format") != DOCUMENT_FORMAT:
        raise SessionFormatError(source, f"expected format '{DOCUMENT_FORMAT}'")
    if data.get("version") != DOCUMENT_VERSION:
        raise SessionFormatError(source, f"unsupported version {data.get('version')!r}")

    try:
        knots = [Knot.from_dict(k) for k in data["knots"]]
        progress = data.get("progress")
        progress = float(progress) if progress is not None else None
    except (KeyError, TypeError, ValueError) as e:
        raise SessionFormatError(source, f"malformed knot data ({e})") from e

    return EditorDocument(knots=knots, progress=progress)


def draw_path(path: BezierPath, pen: AbstractPen) -> None:
    """Draw a path into a fontTools pen as an open contour.

    Each segment becomes one curveTo call using the start knot's outgoing
    control and the end knot's incoming control. Paths with fewer than two
    knots draw nothing.

    Args:
        path: Path to draw
        pen: Any fontTools pen (SVG, bounds, recording, ...)
    """
    if len(path) < 2:
        return

    pen.moveTo(path[0].anchor.to_tuple())
    for segment in path.segments():
        _, p1, p2, p3 = segment.control_points()
        pen.curveTo(p1.to_tuple(), p2.to_tuple(), p3.to_tuple())
    pen.endPath()


def _fmt(value: float) -> str:
    return f"{round(value, 3):g}"


def path_to_svg_data(path: BezierPath) -> str:
    """Convert a path to SVG path data ("M ... C ...").

    Args:
        path: Path to convert

    Returns:
        SVG path data string, empty for paths with fewer than two knots
    """
    pen = SVGPathPen(None, ntos=_fmt)
    draw_path(path, pen)
    return pen.getCommands()


def polyline_to_svg_data(points: list[Point]) -> str:
    """Convert a polyline to SVG path data ("M ... L ...")."""
    if len(points) < 2:
        return ""
    pen = SVGPathPen(None, ntos=_fmt)
    pen.moveTo(points[0].to_tuple())
    for point in points[1:]:
        pen.lineTo(point.to_tuple())
    pen.endPath()
    return pen.getCommands()


def path_length(path: BezierPath) -> float:
    """Approximate the total arc length of a path.

    Args:
        path: Path to measure

    Returns:
        Sum of the approximate lengths of all segments
    """
    total = 0.0
    for segment in path.segments():
        p0, p1, p2, p3 = segment.control_points()
        total += approximateCubicArcLength(
            p0.to_tuple(), p1.to_tuple(), p2.to_tuple(), p3.to_tuple()
        )
    return total


def _bounds(path: BezierPath, marker: Point | None) -> tuple[float, float, float, float]:
    """Bounding box of every anchor, control point and the marker."""
    pen = ControlBoundsPen(None)
    draw_path(path, pen)

    xs: list[float] = []
    ys: list[float] = []
    if pen.bounds is not None:
        x_min, y_min, x_max, y_max = pen.bounds
        xs += [x_min, x_max]
        ys += [y_min, y_max]

    # Outer handles are not part of any segment, but the view still shows them
    for knot in path:
        for point in (knot.anchor, knot.outgoing_control, knot.incoming_control):
            xs.append(point.x)
            ys.append(point.y)
    if marker is not None:
        xs.append(marker.x)
        ys.append(marker.y)

    if not xs:
        return (0.0, 0.0, 0.0, 0.0)
    return (min(xs), min(ys), max(xs), max(ys))


def _circle(center: Point, radius: float, color: str) -> str:
    return (
        f'<circle cx="{_fmt(center.x)}" cy="{_fmt(center.y)}" '
        f'r="{_fmt(radius)}" fill="{color}"/>'
    )


def render_svg(
    path: BezierPath,
    marker: Point | None = None,
    config: RenderConfig | None = None,
    flatten_tolerance: float | None = None,
) -> str:
    """Render the editor view of a path as an SVG document.

    Draws dashed control lines through each knot, control point dots,
    anchor dots, the curve itself and the progress marker, in that order.

    Args:
        path: Path to render
        marker: Progress marker position, drawn if not None
        config: Render settings (defaults if None)
        flatten_tolerance: If given, draw the curve as a flattened polyline
            with this tolerance instead of cubic commands

    Returns:
        SVG document as a string
    """
    config = config if config is not None else RenderConfig()

    x_min, y_min, x_max, y_max = _bounds(path, marker)
    margin = config.margin
    width = (x_max - x_min) + 2 * margin
    height = (y_max - y_min) + 2 * margin

    elements: list[str] = []

    if config.show_controls:
        for knot in path:
            start, end = knot.outgoing_control, knot.incoming_control
            elements.append(
                f'<line x1="{_fmt(start.x)}" y1="{_fmt(start.y)}" '
                f'x2="{_fmt(end.x)}" y2="{_fmt(end.y)}" stroke="{CONTROL_LINE_COLOR}" '
                f'stroke-width="1" stroke-dasharray="3 3"/>'
            )
        for knot in path:
            elements.append(_circle(knot.outgoing_control, config.control_radius, CONTROL_COLOR))
            elements.append(_circle(knot.incoming_control, config.control_radius, CONTROL_COLOR))

    for knot in path:
        elements.append(_circle(knot.anchor, config.anchor_radius, ANCHOR_COLOR))

    if flatten_tolerance is not None:
        data = polyline_to_svg_data(path.flatten(flatten_tolerance))
    else:
        data = path_to_svg_data(path)
    if data:
        elements.append(
            f'<path d="{data}" fill="none" stroke="{CURVE_COLOR}" '
            f'stroke-width="{_fmt(config.curve_width)}"/>'
        )

    if marker is not None:
        elements.append(_circle(marker, config.marker_radius, MARKER_COLOR))

    header = (
        '<svg xmlns="http://www.w3.org/2000/svg" '
        f'viewBox="{_fmt(x_min - margin)} {_fmt(y_min - margin)} '
        f'{_fmt(width)} {_fmt(height)}">'
    )
    body = "\n".join(f"  {element}" for element in elements)
    return f"{header}\n{body}\n</svg>\n" if body else f"{header}\n</svg>\n"
