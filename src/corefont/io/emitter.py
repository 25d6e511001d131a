"""Registry emitter for generated metrics modules.

This module renders a finished FontMetricsRegistry, together with the glyph
encodings, into an embeddable artifact: a Python module that can be dropped
into a code base, or a JSON document. Rendering is deterministic; the same
registry always produces byte-identical text.
"""

import json
from collections.abc import Sequence
from pathlib import Path

from corefont.config import OutputFormat
from corefont.domain.encoding import (
    SYMBOL_ENCODING,
    WIN_ANSI_ENCODING,
    ZAPF_DINGBATS_ENCODING,
    GlyphEncoding,
)
from corefont.domain.metrics import FontBoundingBox, FontMetricsRegistry
from corefont.exceptions import ArtifactWriteError

GENERATED_HEADER = '"""Standard font metrics.\n\nGenerated by corefont. DO NOT EDIT.\n"""\n'

DEFAULT_ENCODINGS: tuple[GlyphEncoding, ...] = (
    WIN_ANSI_ENCODING,
    SYMBOL_ENCODING,
    ZAPF_DINGBATS_ENCODING,
)

# Lookup table descriptions, keyed by encoding name
ENCODING_DESCRIPTIONS = {
    "WinAnsi": "CP1252 character codes",
    "Symbol": "Symbol character codes",
    "ZapfDingbats": "ZapfDingbats character codes",
}

METRICS_VARIABLE = "CORE_FONT_METRICS"


def glyph_map_variable(encoding: GlyphEncoding) -> str:
    """Get the module-level variable name for an encoding's glyph map.

    Converts: WinAnsi -> WIN_ANSI_GLYPH_MAP
              ZapfDingbats -> ZAPF_DINGBATS_GLYPH_MAP
    """
    words: list[str] = []
    for char in encoding.name:
        if char.isupper() and words:
            words.append("_")
        words.append(char.upper())
    return "".join(words) + "_GLYPH_MAP"


def _format_bbox(bbox: FontBoundingBox) -> str:
    return "({:.1f}, {:.1f}, {:.1f}, {:.1f})".format(*bbox.as_tuple())


class RegistryEmitter:
    """Renders a font metrics registry and glyph encodings.

    The emitter performs no validation of its own; the registry it receives
    is complete and already validated by the builder.

    Example:
        emitter = RegistryEmitter(registry)
        emitter.write(Path("core_font_metrics.py"))
    """

    def __init__(
        self,
        registry: FontMetricsRegistry,
        encodings: Sequence[GlyphEncoding] = DEFAULT_ENCODINGS,
        output_format: OutputFormat = OutputFormat.PYTHON,
    ) -> None:
        """Initialize the emitter.

        Args:
            registry: Finished font metrics registry
            encodings: Glyph encodings to include, in output order
            output_format: Artifact format
        """
        self._registry = registry
        self._encodings = tuple(encodings)
        self._format = output_format

    @property
    def output_format(self) -> OutputFormat:
        return self._format

    def render(self) -> str:
        """Render the artifact text.

        Returns:
            Python module source or JSON document
        """
        if self._format is OutputFormat.JSON:
            return self._render_json()
        return self._render_python()

    def write(self, output_path: Path) -> int:
        """Render and write the artifact.

        Args:
            output_path: Destination file

        Returns:
            Number of bytes written

        Raises:
            ArtifactWriteError: If the file cannot be written
        """
        data = self.render().encode("utf-8")
        try:
            output_path.write_bytes(data)
        except OSError as e:
            raise ArtifactWriteError(str(output_path), e.strerror or str(e)) from e
        return len(data)

    def _render_python(self) -> str:
        lines = [GENERATED_HEADER]

        for encoding in self._encodings:
            description = ENCODING_DESCRIPTIONS.get(encoding.name, f"{encoding.name} character codes")
            lines.append("")
            lines.append(f"# {glyph_map_variable(encoding)} is a glyph lookup table for {description}.")
            lines.append(f"{glyph_map_variable(encoding)}: dict[int, str] = {{")
            for code, glyph_name in encoding.items():
                lines.append(f"    {code}: {glyph_name!r},  # {code:#o}")
            lines.append("}")
            lines.append("")

        lines.append("")
        lines.append("# Font metrics of the standard Type 1 core fonts.")
        lines.append("# Each entry holds the font bounding box and the glyph widths.")
        lines.append(f"{METRICS_VARIABLE}: dict[str, dict] = {{")
        for font_name, metrics in self._registry.items():
            lines.append(f"    {font_name!r}: {{")
            lines.append(f'        "bbox": {_format_bbox(metrics.bbox)},')
            lines.append('        "widths": {')
            for glyph_name, width in metrics.widths.items():
                lines.append(f"            {glyph_name!r}: {width},")
            lines.append("        },")
            lines.append("    },")
        lines.append("}")

        return "\n".join(lines) + "\n"

    def _render_json(self) -> str:
        document = {
            "encodings": {
                encoding.name: {str(code): name for code, name in encoding.items()}
                for encoding in self._encodings
            },
            "fonts": {
                font_name: {
                    "bbox": [round(value, 1) for value in metrics.bbox.as_tuple()],
                    "widths": dict(metrics.widths),
                }
                for font_name, metrics in self._registry.items()
            },
        }
        return json.dumps(document, indent=2) + "\n"
