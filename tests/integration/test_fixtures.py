"""End-to-end tests over the AFM fixtures.

The parser is cross-checked against fontTools' AFM reader, and the full
build-and-emit pipeline is checked for reproducible output.
"""

import shutil
from pathlib import Path

import pytest
from fontTools.afmLib import AFM

from corefont.core import RegistryBuilder, parse_afm
from corefont.exceptions import BuildError
from corefont.io import RegistryEmitter

FIXTURES_DIR = Path(__file__).resolve().parent.parent / "fixtures" / "afm"
AFM_FIXTURES = sorted(FIXTURES_DIR.glob("*.afm"))


def count_char_lines(path: Path) -> int:
    """Count C lines between StartCharMetrics and EndCharMetrics."""
    count = 0
    in_metrics = False
    for line in path.read_text(encoding="latin-1").splitlines():
        fields = line.split()
        if not fields:
            continue
        if fields[0] == "StartCharMetrics":
            in_metrics = True
        elif fields[0] == "EndCharMetrics":
            break
        elif in_metrics and fields[0] == "C":
            count += 1
    return count


@pytest.mark.parametrize("path", AFM_FIXTURES, ids=lambda path: path.stem)
class TestFixtureParsing:
    """Parse each fixture and compare against fontTools."""

    def test_matches_fonttools(self, path):
        """Test that widths and bounding box agree with fontTools.afmLib."""
        with path.open(encoding="latin-1") as stream:
            metrics = parse_afm(stream)
        reference = AFM(str(path))

        assert metrics.bbox.as_tuple() == tuple(float(v) for v in reference.FontBBox)
        assert sorted(metrics.widths) == sorted(reference.chars())
        for glyph_name, width in metrics.widths.items():
            assert reference[glyph_name][1] == width

    def test_one_entry_per_char_line(self, path):
        """Test that the width table has one entry per C line."""
        with path.open(encoding="latin-1") as stream:
            metrics = parse_afm(stream)

        assert metrics.glyph_count == count_char_lines(path)


class TestFixtureBuild:
    """Build the registry from the fixture directory."""

    def test_registry_keys(self):
        """Test one registry entry per AFM file, keyed by file stem."""
        registry = RegistryBuilder().build(FIXTURES_DIR)

        assert len(registry) == len(AFM_FIXTURES)
        assert list(registry) == ["Courier", "Helvetica", "Symbol"]

    def test_known_widths(self):
        """Test a few widths from the fixtures."""
        registry = RegistryBuilder().build(FIXTURES_DIR)

        assert registry["Helvetica"].width_of("space") == 278
        assert registry["Helvetica"].width_of("Scaron") == 667
        assert registry["Courier"].width_of("A") == 600
        assert registry["Symbol"].width_of("Alpha") == 722
        assert registry["Symbol"].bbox.as_tuple() == (-180.0, -293.0, 1090.0, 1010.0)

    def test_output_byte_identical(self, tmp_path):
        """Test that two runs produce byte-identical artifacts."""
        first = tmp_path / "first.py"
        second = tmp_path / "second.py"

        RegistryEmitter(RegistryBuilder().build(FIXTURES_DIR)).write(first)
        RegistryEmitter(RegistryBuilder().build(FIXTURES_DIR)).write(second)

        assert first.read_bytes() == second.read_bytes()

    def test_one_bad_file_aborts(self, tmp_path):
        """Test that a malformed file among good ones yields no registry."""
        source = tmp_path / "afm"
        shutil.copytree(FIXTURES_DIR, source)
        (source / "Broken.afm").write_text(
            "StartFontMetrics 4.1\nFontBBox 0 0 1 1\nStartCharMetrics 1\nC 32 ; WX\nEndCharMetrics\n"
        )

        registry = None
        with pytest.raises(BuildError) as exc_info:
            registry = RegistryBuilder().build(source)

        assert registry is None
        assert exc_info.value.filename == "Broken.afm"
