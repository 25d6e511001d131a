"""Unit tests for the registry builder.

Tests for list_font_files, font_name_for, RegistryBuilder and build_registry.
"""

from pathlib import Path
from unittest.mock import patch

import pytest

from corefont.config import CoreFontSettings, ParserConfig, SourceConfig
from corefont.core.builder import (
    RegistryBuilder,
    build_registry,
    font_name_for,
    list_font_files,
)
from corefont.exceptions import (
    BuildError,
    CorruptFileError,
    MissingBoundingBoxError,
    SourceDirectoryError,
)


def write_afm(directory: Path, filename: str, bbox: str = "0 0 1000 1000", **widths: int) -> Path:
    """Write a small well-formed AFM file."""
    lines = [
        "StartFontMetrics 4.1",
        f"FontName {filename.split('.')[0]}",
        f"FontBBox {bbox}",
        f"StartCharMetrics {len(widths)}",
    ]
    for code, (name, width) in enumerate(widths.items(), start=32):
        lines.append(f"C {code} ; WX {width} ; N {name} ; B 0 0 0 0 ;")
    lines += ["EndCharMetrics", "EndFontMetrics"]

    path = directory / filename
    path.write_text("\n".join(lines) + "\n", encoding="latin-1")
    return path


class TestListFontFiles:
    """Tests for list_font_files."""

    def test_sorted_by_filename(self, tmp_path):
        """Test that files are returned in ascending filename order."""
        for name in ["Times-Roman.afm", "Courier.afm", "Helvetica-Bold.afm", "Helvetica.afm"]:
            write_afm(tmp_path, name)

        names = [path.name for path in list_font_files(tmp_path)]

        assert names == ["Courier.afm", "Helvetica-Bold.afm", "Helvetica.afm", "Times-Roman.afm"]

    def test_order_independent_of_listing(self, tmp_path):
        """Test that the file system's enumeration order is not relied on."""
        for name in ["b.afm", "a.afm", "c.afm"]:
            write_afm(tmp_path, name)
        reversed_entries = sorted(tmp_path.iterdir(), reverse=True)

        with patch.object(Path, "iterdir", return_value=iter(reversed_entries)):
            names = [path.name for path in list_font_files(tmp_path)]

        assert names == ["a.afm", "b.afm", "c.afm"]

    def test_other_entries_ignored(self, tmp_path):
        """Test that non-matching files and directories are skipped."""
        write_afm(tmp_path, "Courier.afm")
        (tmp_path / "README.txt").write_text("notes")
        (tmp_path / "Times.AFM").write_text("upper case extension")
        (tmp_path / "Courier.afm.bak").write_text("backup")
        (tmp_path / "nested.afm").mkdir()

        names = [path.name for path in list_font_files(tmp_path)]

        assert names == ["Courier.afm"]

    def test_bare_extension_skipped(self, tmp_path):
        """Test that a file named only by the extension gets no font entry."""
        write_afm(tmp_path, ".afm")
        write_afm(tmp_path, "Courier.afm")

        names = [path.name for path in list_font_files(tmp_path)]
        registry = RegistryBuilder().build(tmp_path)

        assert names == ["Courier.afm"]
        assert list(registry) == ["Courier"]

    def test_custom_extension(self, tmp_path):
        """Test listing with a different extension."""
        write_afm(tmp_path, "Courier.metrics")
        write_afm(tmp_path, "Helvetica.afm")

        names = [path.name for path in list_font_files(tmp_path, ".metrics")]

        assert names == ["Courier.metrics"]

    def test_empty_directory(self, tmp_path):
        """Test that an empty directory yields no files."""
        assert list_font_files(tmp_path) == []

    def test_missing_directory(self, tmp_path):
        """Test that a missing directory raises SourceDirectoryError."""
        with pytest.raises(SourceDirectoryError, match="no such directory"):
            list_font_files(tmp_path / "missing")

    def test_file_instead_of_directory(self, tmp_path):
        """Test that a file path raises SourceDirectoryError."""
        path = write_afm(tmp_path, "Courier.afm")
        with pytest.raises(SourceDirectoryError, match="not a directory"):
            list_font_files(path)

    def test_unreadable_directory(self, tmp_path):
        """Test that a listing failure raises SourceDirectoryError."""
        with patch.object(Path, "iterdir", side_effect=PermissionError(13, "Permission denied")):
            with pytest.raises(SourceDirectoryError, match="Permission denied") as exc_info:
                list_font_files(tmp_path)

        assert exc_info.value.path == str(tmp_path)


class TestFontNameFor:
    """Tests for font_name_for."""

    def test_strips_extension(self):
        """Test that the extension is removed."""
        assert font_name_for("Helvetica-BoldOblique.afm") == "Helvetica-BoldOblique"

    def test_no_other_normalization(self):
        """Test that case and inner whitespace are preserved."""
        assert font_name_for("My Font.afm") == "My Font"
        assert font_name_for("ZapfDingbats.afm") == "ZapfDingbats"

    def test_only_last_extension(self):
        """Test that only the trailing extension is stripped."""
        assert font_name_for("Font.v2.afm") == "Font.v2"

    def test_custom_extension(self):
        """Test stripping a custom extension."""
        assert font_name_for("Courier.metrics", ".metrics") == "Courier"


class TestRegistryBuilder:
    """Tests for RegistryBuilder."""

    def test_build(self, tmp_path):
        """Test building a registry from well-formed files."""
        write_afm(tmp_path, "Helvetica.afm", "-166 -225 1000 931", space=278, A=667)
        write_afm(tmp_path, "Courier.afm", "-23 -250 715 805", space=600)

        registry = RegistryBuilder().build(tmp_path)

        assert len(registry) == 2
        assert list(registry) == ["Courier", "Helvetica"]
        assert registry["Helvetica"].bbox.as_tuple() == (-166.0, -225.0, 1000.0, 931.0)
        assert dict(registry["Helvetica"].widths) == {"space": 278, "A": 667}
        assert registry["Courier"].width_of("space") == 600

    def test_build_empty_directory(self, tmp_path):
        """Test that a directory without AFM files gives an empty registry."""
        (tmp_path / "README.txt").write_text("notes")

        registry = RegistryBuilder().build(tmp_path)

        assert len(registry) == 0

    def test_stats(self, tmp_path):
        """Test that build statistics are collected."""
        write_afm(tmp_path, "A.afm", space=1, a=2)
        write_afm(tmp_path, "B.afm", space=3)

        builder = RegistryBuilder()
        builder.build(tmp_path)

        assert builder.stats.files_parsed == 2
        assert builder.stats.glyphs_parsed == 3
        assert builder.stats.error_count == 0
        assert builder.stats.duration_seconds >= 0.0

    def test_corrupt_file_aborts_build(self, tmp_path):
        """Test that one malformed file aborts the whole build."""
        write_afm(tmp_path, "A.afm", space=1)
        (tmp_path / "B.afm").write_text("FontBBox 0 0 1\nStartCharMetrics\nEndCharMetrics\n")
        write_afm(tmp_path, "C.afm", space=3)

        builder = RegistryBuilder()
        with pytest.raises(BuildError) as exc_info:
            builder.build(tmp_path)

        error = exc_info.value
        assert error.filename == "B.afm"
        assert isinstance(error.cause, CorruptFileError)
        assert error.__cause__ is error.cause
        assert error.is_corrupt_file
        assert "B.afm" in str(error)
        assert builder.stats.files_parsed == 1
        assert builder.stats.errors == [("B.afm", str(error.cause))]

    def test_missing_bbox_surfaces_in_build_error(self, tmp_path):
        """Test that the originating error kind is kept."""
        (tmp_path / "Bad.afm").write_text("StartCharMetrics 0\nEndCharMetrics\n")

        with pytest.raises(BuildError) as exc_info:
            RegistryBuilder().build(tmp_path)

        assert isinstance(exc_info.value.cause, MissingBoundingBoxError)

    def test_truncated_file_aborts_build(self, tmp_path):
        """Test that an incomplete file is not registered partially."""
        (tmp_path / "Cut.afm").write_text(
            "FontBBox 0 0 1 1\nStartCharMetrics 2\nC 32 ; WX 278 ; N space ; B 0 0 0 0 ;\n"
        )

        with pytest.raises(BuildError, match="before EndCharMetrics"):
            RegistryBuilder().build(tmp_path)

    def test_read_failure_aborts_build(self, tmp_path):
        """Test that an I/O error while reading is reported as BuildError."""
        write_afm(tmp_path, "A.afm", space=1)

        with patch.object(Path, "open", side_effect=PermissionError(13, "Permission denied")):
            with pytest.raises(BuildError) as exc_info:
                RegistryBuilder().build(tmp_path)

        assert isinstance(exc_info.value.cause, OSError)
        assert not exc_info.value.is_corrupt_file

    def test_decode_failure_aborts_build(self, tmp_path):
        """Test that undecodable content is reported as BuildError."""
        (tmp_path / "A.afm").write_bytes(b"FontBBox 0 0 1 1\nComment \xff\xfe\n")
        settings = CoreFontSettings(source=SourceConfig(encoding="ascii"))

        with pytest.raises(BuildError) as exc_info:
            RegistryBuilder(settings).build(tmp_path)

        assert isinstance(exc_info.value.cause, UnicodeDecodeError)

    def test_missing_directory(self, tmp_path):
        """Test that a missing source directory is reported before parsing."""
        with pytest.raises(SourceDirectoryError):
            RegistryBuilder().build(tmp_path / "missing")

    def test_latin1_glyph_names(self, tmp_path):
        """Test that AFM files are read as 8-bit text."""
        (tmp_path / "A.afm").write_bytes(
            b"Comment \xa9 Adobe\nFontBBox 0 0 1 1\nStartCharMetrics 1\n"
            b"C 32 ; WX 250 ; N space ; B 0 0 0 0 ;\nEndCharMetrics\n"
        )

        registry = RegistryBuilder().build(tmp_path)

        assert dict(registry["A"].widths) == {"space": 250}

    def test_reject_duplicates_setting(self, tmp_path):
        """Test that the parser setting reaches the parser."""
        (tmp_path / "Dup.afm").write_text(
            "FontBBox 0 0 1 1\nStartCharMetrics 2\n"
            "C 32 ; WX 1 ; N space ; B 0 0 0 0 ;\n"
            "C 33 ; WX 2 ; N space ; B 0 0 0 0 ;\n"
            "EndCharMetrics\n"
        )

        registry = RegistryBuilder().build(tmp_path)
        assert registry["Dup"].width_of("space") == 2

        settings = CoreFontSettings(parser=ParserConfig(reject_duplicate_glyphs=True))
        with pytest.raises(BuildError, match="duplicate glyph"):
            RegistryBuilder(settings).build(tmp_path)

    def test_build_is_deterministic(self, tmp_path):
        """Test that two builds of the same directory are equal."""
        write_afm(tmp_path, "Z.afm", space=1, z=5)
        write_afm(tmp_path, "M.afm", space=2)
        write_afm(tmp_path, "A.afm", space=3)

        first = RegistryBuilder().build(tmp_path)
        second = RegistryBuilder().build(tmp_path)

        assert list(first) == list(second) == ["A", "M", "Z"]
        assert first.to_dict() == second.to_dict()


class TestBuildRegistry:
    """Tests for the build_registry convenience function."""

    def test_build_registry(self, tmp_path):
        """Test building with default settings."""
        write_afm(tmp_path, "Courier.afm", space=600)

        registry = build_registry(tmp_path)

        assert list(registry) == ["Courier"]

    def test_build_registry_extension(self, tmp_path):
        """Test building with a custom extension."""
        write_afm(tmp_path, "Courier.metrics", space=600)
        write_afm(tmp_path, "Helvetica.afm", space=278)

        registry = build_registry(tmp_path, extension=".metrics")

        assert list(registry) == ["Courier"]
