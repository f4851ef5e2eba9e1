# -*- coding: utf-8 -*-
"""
src/emojied/core/rasterizer.py

Renders a single emoji glyph to a square PNG image and hands it to a file
sink.

The drawing itself lives behind the `GlyphCanvas` interface so the export
logic can run without a display or any particular font installed. The
default `PillowCanvas` draws with Pillow on a transparent RGBA canvas.
"""

import io
import logging
import platform
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

from .errors import CapabilityUnavailable, EncodingFailure

logger = logging.getLogger(__name__)

DEFAULT_CANVAS_SIZE = 128
DEFAULT_FONT_SCALE = 0.8

# Bitmap colour fonts (CBDT/sbix) can only be opened at the sizes they embed.
# Noto Color Emoji ships a single 109px strike; Apple Color Emoji ships several.
BITMAP_STRIKE_SIZES = (109, 160, 96, 64)

FileSink = Callable[[bytes, str], object]


def filename_for(glyph: str) -> str:
    """
    The download filename for a glyph, derived from its first code point.

    >>> filename_for("🐍")
    'emoji-1f40d.png'
    """
    return f"emoji-{ord(glyph[0]):x}.png"


def get_system_font_candidates() -> List[Path]:
    """
    Colour-emoji fonts first, then a plain serif fallback, for this platform.
    """
    system = platform.system()
    if system == "Windows":
        fonts = Path("C:/Windows/Fonts")
        return [fonts / "seguiemj.ttf", fonts / "times.ttf"]
    if system == "Darwin":  # macOS
        return [
            Path("/System/Library/Fonts/Apple Color Emoji.ttc"),
            Path("/System/Library/Fonts/Supplemental/Times New Roman.ttf"),
            Path("/Library/Fonts/Times New Roman.ttf"),
        ]
    # Linux and other Unix-like
    return [
        Path("/usr/share/fonts/truetype/noto/NotoColorEmoji.ttf"),
        Path("/usr/share/fonts/noto/NotoColorEmoji.ttf"),
        Path("/usr/share/fonts/google-noto-emoji/NotoColorEmoji.ttf"),
        Path("/usr/share/fonts/truetype/dejavu/DejaVuSerif.ttf"),
        Path("/usr/share/fonts/dejavu/DejaVuSerif.ttf"),
    ]


class GlyphCanvas(ABC):
    """Draws a glyph and encodes the result as PNG bytes."""

    @abstractmethod
    def render_png(self, glyph: str) -> bytes:
        """
        Raises:
            CapabilityUnavailable: If no canvas or font could be set up.
            EncodingFailure: If the image could not be encoded.
        """


class PillowCanvas(GlyphCanvas):
    """
    Pillow implementation of the glyph canvas.

    The glyph is drawn centred on both axes at `font_scale` times the canvas
    edge. When the only usable font is a bitmap colour font, the glyph is
    drawn at the font's native strike on a proportionally larger canvas and
    resampled down to `size`.
    """

    def __init__(
        self,
        size: int = DEFAULT_CANVAS_SIZE,
        font_scale: float = DEFAULT_FONT_SCALE,
        font_paths: Optional[Iterable[Path]] = None,
    ):
        if size <= 0:
            raise ValueError(f"Canvas size must be positive, got {size}")
        if not 0.0 < font_scale <= 1.0:
            raise ValueError(f"font_scale must be within (0, 1], got {font_scale}")
        self.size = size
        self.font_scale = font_scale
        self.font_size = max(1, int(round(size * font_scale)))
        if font_paths is None:
            font_paths = get_system_font_candidates()
        self.font_paths = [Path(p) for p in font_paths]
        self._font: Optional[Tuple[ImageFont.ImageFont, int]] = None

    def _load_font(self) -> Tuple[ImageFont.ImageFont, int]:
        """
        Finds the first usable font.

        Returns:
            The font and the pixel size it was opened at.
        """
        if self._font is not None:
            return self._font

        for font_path in self.font_paths:
            if not font_path.exists():
                continue
            for font_size in (self.font_size,) + BITMAP_STRIKE_SIZES:
                try:
                    font = ImageFont.truetype(str(font_path), font_size)
                except OSError:
                    continue
                logger.info(f"Using font '{font_path}' at {font_size}px for export.")
                self._font = (font, font_size)
                return self._font
            logger.debug(f"Font '{font_path}' could not be opened at any size.")

        try:
            font = ImageFont.load_default(size=self.font_size)
        except (OSError, ValueError) as e:
            raise CapabilityUnavailable(f"No usable font for rendering: {e}") from e
        logger.warning("No system emoji font found; falling back to Pillow's default font.")
        self._font = (font, self.font_size)
        return self._font

    def _draw(self, glyph: str) -> Image.Image:
        font, font_size = self._load_font()
        # Keep the glyph-to-edge ratio when drawing at a native strike size
        edge = self.size if font_size == self.font_size else int(round(font_size / self.font_scale))

        try:
            image = Image.new("RGBA", (edge, edge), (0, 0, 0, 0))
            draw = ImageDraw.Draw(image)
            draw.text(
                (edge / 2, edge / 2), glyph,
                font=font, fill=(0, 0, 0, 255), anchor="mm", embedded_color=True,
            )
        except (OSError, ValueError, MemoryError) as e:
            raise CapabilityUnavailable(f"Could not draw glyph {glyph!r}: {e}") from e

        if edge != self.size:
            image = image.resize((self.size, self.size), Image.Resampling.LANCZOS)
        return image

    def render_png(self, glyph: str) -> bytes:
        image = self._draw(glyph)
        buffer = io.BytesIO()
        try:
            image.save(buffer, format="PNG")
        except (OSError, ValueError) as e:
            raise EncodingFailure(f"PNG encoding failed for {glyph!r}: {e}") from e
        return buffer.getvalue()


class Rasterizer:
    """
    Exports glyphs as PNG files through an injected canvas and file sink.
    """

    def __init__(self, canvas: GlyphCanvas, sink: FileSink):
        """
        Args:
            canvas (GlyphCanvas): Draws and encodes the glyph.
            sink (FileSink): Called with the PNG bytes and the filename.
        """
        self.canvas = canvas
        self.sink = sink

    def render(self, glyph: str) -> Optional[str]:
        """
        Renders `glyph` and saves it as `emoji-<hex code point>.png`.

        Returns:
            A status message for the user, or None if anything went wrong.
            Failures are logged and never raised.
        """
        if not glyph:
            logger.warning("Export requested for an empty glyph; ignoring.")
            return None

        filename = filename_for(glyph)
        try:
            data = self.canvas.render_png(glyph)
        except (CapabilityUnavailable, EncodingFailure) as e:
            logger.error(f"Failed to render {glyph!r}: {e}")
            return None

        try:
            self.sink(data, filename)
        except OSError as e:
            logger.error(f"Failed to save '{filename}': {e}")
            return None

        logger.info(f"Exported {glyph!r} as '{filename}' ({len(data)} bytes).")
        return f"Saved {glyph} as PNG"
