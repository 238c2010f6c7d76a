"""
Tests for the command line, logging setup and environment settings.
"""

import json
import logging
import math

import pytest

from geometrix.__main__ import main
from geometrix.codec import save_file
from geometrix.config import get_log_level
from geometrix.core import Point2d, Point3d
from geometrix.logging_config import setup_logging
from geometrix.shapes import Arc2d, Circle2d, LineSegment2d, Triangle2d


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger = logging.getLogger("geometrix")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


@pytest.fixture
def shapes_file(tmp_path):
    shapes = [
        Circle2d(Point2d(0, 0), 1.0),
        LineSegment2d(Point2d(2, -3), Point2d(4, 0)),
        Point2d(-2, 5),
    ]
    return save_file(tmp_path / "shapes.json", shapes)


class TestCommands:
    """Tests for the bbox, measure and validate commands."""

    def test_bbox(self, shapes_file, capsys):
        assert main(["bbox", str(shapes_file)]) == 0
        result = json.loads(capsys.readouterr().out)
        assert result == {"minX": -2.0, "maxX": 4.0, "minY": -3.0, "maxY": 5.0}

    def test_bbox_of_empty_file(self, tmp_path, capsys):
        path = save_file(tmp_path / "empty.json", [])
        assert main(["bbox", str(path)]) == 0
        assert capsys.readouterr().out.strip() == "null"

    def test_bbox_mixed_dimensions(self, tmp_path):
        """2D and 3D shapes cannot share a bounding box."""
        path = save_file(tmp_path / "mixed.json", [Point2d(0, 0), Point3d(0, 0, 0)])
        assert main(["bbox", str(path)]) == 1

    def test_measure(self, tmp_path, capsys):
        shapes = [
            Triangle2d(Point2d(0, 0), Point2d(2, 0), Point2d(1, 2)),
            Arc2d(Point2d(0, 0), Point2d(1, 0), math.pi),
        ]
        path = save_file(tmp_path / "measure.json", shapes)
        assert main(["measure", str(path)]) == 0
        result = json.loads(capsys.readouterr().out)
        assert result[0]["type"] == "triangle2d"
        assert result[0]["area"] == 2.0
        assert result[1]["type"] == "arc2d"
        assert math.isclose(result[1]["length"], math.pi)
        assert "area" not in result[1]

    def test_validate(self, shapes_file, capsys):
        assert main(["validate", str(shapes_file)]) == 0
        assert capsys.readouterr().out.strip() == "OK: 3 shapes"

    def test_invalid_file(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text('[{"type": "point2d", "value": [1]}]', encoding="utf-8")
        assert main(["validate", str(path)]) == 2

    def test_missing_file(self, tmp_path):
        assert main(["validate", str(tmp_path / "missing.json")]) == 2

    def test_non_utf8_file(self, tmp_path):
        path = tmp_path / "binary.json"
        path.write_bytes(b"\xff\xfe[]")
        assert main(["validate", str(path)]) == 2

    def test_unknown_command(self, shapes_file):
        with pytest.raises(SystemExit):
            main(["explode", str(shapes_file)])

    def test_log_file(self, shapes_file, tmp_path):
        log_path = tmp_path / "run.log"
        assert main(["validate", str(shapes_file), "--log-level", "info", "--log-file", str(log_path)]) == 0
        assert "Loading shapes from" in log_path.read_text(encoding="utf-8")


class TestLogging:
    """Tests for setup_logging()."""

    def test_level_by_name(self):
        logger = setup_logging("debug")
        assert logger.name == "geometrix"
        assert logger.level == logging.DEBUG

    def test_no_duplicate_handlers(self):
        setup_logging(logging.INFO)
        logger = setup_logging(logging.WARNING)
        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING


class TestConfig:
    """Tests for environment-driven settings."""

    def test_default_level(self, monkeypatch):
        monkeypatch.delenv("GEOMETRIX_LOG_LEVEL", raising=False)
        assert get_log_level() == "WARNING"

    def test_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("GEOMETRIX_LOG_LEVEL", " debug ")
        assert get_log_level() == "DEBUG"

    def test_unknown_level_falls_back(self, monkeypatch):
        monkeypatch.setenv("GEOMETRIX_LOG_LEVEL", "chatty")
        assert get_log_level("ERROR") == "ERROR"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
