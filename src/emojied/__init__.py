"""
Emojied Application Package.

This package contains the emoji search utility: the fuzzy matching and
interaction engine (`emojied.core`), the PyQt6 user interface
(`emojied.gui`) and the host capabilities it uses (`emojied.utils`).

The Qt-dependent application controller lives in `emojied.app` and is not
imported here, so the core can be used without a display.
"""

__version__ = "0.1.0"

from .core import GlyphRecord, Matcher, Mode, QueryPipeline, Rasterizer

__all__ = ["GlyphRecord", "Matcher", "Mode", "QueryPipeline", "Rasterizer"]
