"""Integration tests for the command-line interface."""

import ast
import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from corefont import __version__
from corefont.cli.app import app

FIXTURES_DIR = Path(__file__).resolve().parent.parent / "fixtures" / "afm"

runner = CliRunner()


class TestGenerate:
    """Tests for generating artifacts."""

    def test_writes_python_module(self, tmp_path):
        """Test that the module is written and holds every fixture font."""
        output_path = tmp_path / "metrics.py"

        result = runner.invoke(app, [str(FIXTURES_DIR), "-o", str(output_path)])

        assert result.exit_code == 0, result.output
        source = output_path.read_text(encoding="utf-8")
        ast.parse(source)
        assert "CORE_FONT_METRICS" in source
        assert "'Helvetica': {" in source
        assert "Complete" in result.output

    def test_writes_json(self, tmp_path):
        """Test JSON output."""
        output_path = tmp_path / "metrics.json"

        result = runner.invoke(
            app, [str(FIXTURES_DIR), "--format", "json", "-o", str(output_path), "--quiet"]
        )

        assert result.exit_code == 0, result.output
        document = json.loads(output_path.read_text(encoding="utf-8"))
        assert list(document["fonts"]) == ["Courier", "Helvetica", "Symbol"]

    def test_default_output_path(self, tmp_path, monkeypatch):
        """Test that the default filename is used when no output is given."""
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(app, [str(FIXTURES_DIR), "-q"])

        assert result.exit_code == 0, result.output
        assert (tmp_path / "core_font_metrics.py").exists()

    def test_debug_prints_instead_of_writing(self, tmp_path, monkeypatch):
        """Test that debug mode prints the module and writes nothing."""
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(app, [str(FIXTURES_DIR), "--debug"])

        assert result.exit_code == 0, result.output
        assert "CORE_FONT_METRICS" in result.stdout
        assert "WIN_ANSI_GLYPH_MAP" in result.stdout
        assert list(tmp_path.iterdir()) == []

    def test_list_fonts(self, tmp_path, monkeypatch):
        """Test that --list-fonts shows the fonts and writes nothing."""
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(app, [str(FIXTURES_DIR), "--list-fonts"])

        assert result.exit_code == 0, result.output
        for font_name in ["Courier", "Helvetica", "Symbol"]:
            assert font_name in result.output
        assert list(tmp_path.iterdir()) == []

    def test_log_file(self, tmp_path):
        """Test that --log-file receives structured log records."""
        log_file = tmp_path / "build.log"

        result = runner.invoke(
            app,
            [str(FIXTURES_DIR), "-o", str(tmp_path / "metrics.py"), "--log-file", str(log_file), "-q"],
        )

        assert result.exit_code == 0, result.output
        log_text = log_file.read_text(encoding="utf-8")
        assert "File parsed" in log_text
        assert "Helvetica.afm" in log_text


class TestErrors:
    """Tests for error reporting."""

    def test_corrupt_file(self, tmp_path):
        """Test that a corrupt file aborts with its name and reason."""
        source = tmp_path / "afm"
        source.mkdir()
        (source / "Bad.afm").write_text("StartCharMetrics 1\nEndCharMetrics\n")
        output_path = tmp_path / "metrics.py"

        result = runner.invoke(app, [str(source), "-o", str(output_path)])

        assert result.exit_code == 1
        assert "Bad.afm" in result.output
        assert "StartCharMetrics before FontBBox" in result.output
        assert not output_path.exists()

    def test_missing_source_directory(self, tmp_path):
        """Test that a missing directory is reported."""
        result = runner.invoke(app, [str(tmp_path / "missing"), "-q"])

        assert result.exit_code == 1
        assert "no such directory" in result.output

    def test_unwritable_output(self, tmp_path):
        """Test that an output write failure is reported."""
        result = runner.invoke(app, [str(FIXTURES_DIR), "-o", str(tmp_path / "no" / "metrics.py"), "-q"])

        assert result.exit_code == 1
        assert "Failed to write" in result.output

    def test_verbose_and_quiet(self):
        """Test that --verbose and --quiet are mutually exclusive."""
        result = runner.invoke(app, [str(FIXTURES_DIR), "-v", "-q"])

        assert result.exit_code == 1
        assert "Cannot use --verbose and --quiet together" in result.output

    @pytest.mark.parametrize(
        "args",
        [
            ["--format", "yaml"],
            ["--extension", "afm"],
            ["--log-level", "LOUD"],
        ],
    )
    def test_invalid_options(self, args):
        """Test that invalid option values are rejected."""
        result = runner.invoke(app, [str(FIXTURES_DIR), *args])

        assert result.exit_code == 1


def test_version():
    """Test --version output."""
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output
