"""Artifact I/O layer for corefont.

This module turns a finished font metrics registry into a persisted,
embeddable artifact.

Key responsibilities:
- Render the registry and glyph encodings as a Python module or JSON
- Keep the rendered output byte-identical across runs
- Write the artifact, reporting failures as ArtifactWriteError

Key classes:
- RegistryEmitter: Render and write generated metrics
"""

from corefont.io.emitter import RegistryEmitter, glyph_map_variable

__all__ = [
    "RegistryEmitter",
    "glyph_map_variable",
]
