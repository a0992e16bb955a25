"""End-to-end tests of the command line interface on real files."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from knotinsert import __version__
from knotinsert.cli.app import app
from knotinsert.io import PathReader

runner = CliRunner()


@pytest.fixture
def curve_file(tmp_path: Path) -> Path:
    """A document with knots at (80, 80) and (160, 160)."""
    file_path = tmp_path / "curve.json"
    result = runner.invoke(app, ["-q", "new", str(file_path)])
    assert result.exit_code == 0, result.output
    return file_path


class TestNew:
    """Tests for the new command."""

    def test_creates_document(self, tmp_path: Path):
        file_path = tmp_path / "three.json"
        result = runner.invoke(app, ["new", str(file_path), "--knots", "3"])

        assert result.exit_code == 0, result.output
        assert "Created path with 3 knots" in result.output
        data = json.loads(file_path.read_text(encoding="utf-8"))
        assert [k["anchor"] for k in data["knots"]] == [
            {"x": 80.0, "y": 80.0},
            {"x": 160.0, "y": 160.0},
            {"x": 240.0, "y": 240.0},
        ]

    def test_refuses_to_overwrite(self, curve_file: Path):
        result = runner.invoke(app, ["new", str(curve_file), "-n", "5"])
        assert result.exit_code == 1
        assert len(PathReader(curve_file).load().knots) == 2

    def test_force_overwrites(self, curve_file: Path):
        result = runner.invoke(app, ["-q", "new", str(curve_file), "-n", "5", "--force"])
        assert result.exit_code == 0, result.output
        assert len(PathReader(curve_file).load().knots) == 5


class TestInspect:
    """Tests for the read-only commands."""

    def test_info(self, curve_file: Path):
        result = runner.invoke(app, ["info", str(curve_file)])
        assert result.exit_code == 0, result.output
        assert "2 knots" in result.output
        assert "1 segments" in result.output
        assert "(80.000, 80.000)" in result.output

    def test_point(self, curve_file: Path):
        result = runner.invoke(app, ["point", str(curve_file), "-p", "0.5"])
        assert result.exit_code == 0, result.output
        assert "segment 0" in result.output
        assert "(120.000, 120.000)" in result.output

    def test_point_on_short_path(self, tmp_path: Path):
        file_path = tmp_path / "single.json"
        runner.invoke(app, ["-q", "new", str(file_path), "-n", "1"])
        result = runner.invoke(app, ["point", str(file_path)])
        assert result.exit_code == 0, result.output
        assert "no position" in result.output

    def test_progress_out_of_range(self, curve_file: Path):
        result = runner.invoke(app, ["point", str(curve_file), "-p", "1.5"])
        assert result.exit_code != 0

    def test_missing_file(self, tmp_path: Path):
        result = runner.invoke(app, ["info", str(tmp_path / "missing.json")])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_invalid_document(self, tmp_path: Path):
        file_path = tmp_path / "bad.json"
        file_path.write_text('{"format": "other"}', encoding="utf-8")
        result = runner.invoke(app, ["info", str(file_path)])
        assert result.exit_code == 1

    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_invalid_log_level(self, curve_file: Path):
        result = runner.invoke(app, ["--log-level", "LOUD", "info", str(curve_file)])
        assert result.exit_code == 1


class TestEditing:
    """Tests for the commands that modify a document."""

    def test_split_in_place(self, curve_file: Path):
        result = runner.invoke(app, ["split", str(curve_file), "-p", "0.5"])
        assert result.exit_code == 0, result.output
        assert "Inserted knot 1" in result.output

        document = PathReader(curve_file).load()
        assert len(document.knots) == 3
        assert document.knots[1].anchor.x == pytest.approx(120.0)
        assert document.knots[1].anchor.y == pytest.approx(120.0)
        assert document.progress is None

    def test_split_to_output(self, curve_file: Path, tmp_path: Path):
        output = tmp_path / "split.json"
        result = runner.invoke(app, ["-q", "split", str(curve_file), "-o", str(output)])
        assert result.exit_code == 0, result.output
        assert len(PathReader(output).load().knots) == 3
        assert len(PathReader(curve_file).load().knots) == 2

    def test_split_single_knot_is_notice(self, tmp_path: Path):
        file_path = tmp_path / "single.json"
        runner.invoke(app, ["-q", "new", str(file_path), "-n", "1"])
        result = runner.invoke(app, ["split", str(file_path)])
        assert result.exit_code == 0, result.output
        assert "Nothing to split" in result.output

    def test_delete(self, tmp_path: Path):
        file_path = tmp_path / "three.json"
        runner.invoke(app, ["-q", "new", str(file_path), "-n", "3"])

        result = runner.invoke(app, ["delete", str(file_path), "-p", "0.35"])
        assert result.exit_code == 0, result.output
        assert "Removed knot 1" in result.output

        anchors = [knot.anchor.to_tuple() for knot in PathReader(file_path).load().knots]
        assert anchors == [(80.0, 80.0), (240.0, 240.0)]

    def test_split_then_delete_restores_knot_count(self, curve_file: Path):
        runner.invoke(app, ["-q", "split", str(curve_file), "-p", "0.5"])
        runner.invoke(app, ["-q", "delete", str(curve_file), "-p", "0.5"])
        assert len(PathReader(curve_file).load().knots) == 2


class TestRender:
    """Tests for SVG export."""

    def test_render_default_output(self, curve_file: Path):
        result = runner.invoke(app, ["render", str(curve_file), "-p", "0.5"])
        assert result.exit_code == 0, result.output

        svg = curve_file.with_suffix(".svg").read_text(encoding="utf-8")
        assert svg.startswith("<svg")
        assert svg.count("<circle") == 7

    def test_render_options(self, curve_file: Path, tmp_path: Path):
        output = tmp_path / "plain.svg"
        result = runner.invoke(
            app,
            ["-q", "render", str(curve_file), "-o", str(output), "--no-controls", "--flatten"],
        )
        assert result.exit_code == 0, result.output

        svg = output.read_text(encoding="utf-8")
        assert "<line" not in svg
        assert svg.count("<circle") == 2
