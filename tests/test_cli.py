"""
Tests for the geowkt command line tool.
"""

import io
import json
import logging

import pytest

from geowkt.cli import build_parser, convert_lines, main


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


class TestConvertLines:
    """Tests for convert_lines."""

    def test_optimal_output(self):
        out = io.StringIO()
        lines = [
            "POINT(1 2)\n",
            "\n",
            "linestring(1 2,2 3)\n",
            "GEOMETRYCOLLECTION(POINT(3 4))\n",
        ]

        assert convert_lines(lines, out) == 0
        assert out.getvalue() == "POINT(1 2)\nLINESTRING(1 2,2 3)\nPOINT(3 4)\n"

    def test_failures_counted_and_logged(self, caplog):
        """Test that a bad line is logged with its line number and skipped."""
        out = io.StringIO()

        with caplog.at_level(logging.ERROR, logger="geowkt.cli"):
            failures = convert_lines(["POINT(1 2)", "CIRCLE(0 0,1)"], out)

        assert failures == 1
        assert out.getvalue() == "POINT(1 2)\n"
        (record,) = caplog.records
        assert record.input_line == 2
        assert record.error_code == "UNRECOGNIZED_WKT"
        assert "Line 2" in record.getMessage()


class TestMain:
    """Tests for the command entry point."""

    def test_arguments(self, restore_root_logger, capsys):
        assert main(["POINT(1 2)", "MULTIPOINT(1 2,3 4)"]) == 0

        captured = capsys.readouterr()
        assert captured.out == "POINT(1 2)\nMULTIPOINT(POINT(1 2),POINT(3 4))\n"

    def test_stdin(self, restore_root_logger, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("POINT(1 2)\n\nPOINT(5 6)\n"))

        assert main([]) == 0
        assert capsys.readouterr().out == "POINT(1 2)\nPOINT(5 6)\n"

    def test_failure_exit_status(self, restore_root_logger, capsys):
        assert main(["--log-level", "WARNING", "--no-json-logs", "POLYGON((0 0"]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Line 1" in captured.err
        assert "1 geometries could not be converted" in captured.err

    def test_json_log_file(self, restore_root_logger, tmp_path, capsys):
        log_file = tmp_path / "geowkt.log"

        assert main(["--json-logs", "--log-file", str(log_file), "CIRCLE(0 0,1)"]) == 1

        payloads = [
            json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()
        ]
        errors = [p for p in payloads if p["level"] == "ERROR"]
        assert errors[0]["input_line"] == 1
        assert errors[0]["error_code"] == "UNRECOGNIZED_WKT"

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["--version"])

        assert exc_info.value.code == 0
        assert "geowkt" in capsys.readouterr().out
