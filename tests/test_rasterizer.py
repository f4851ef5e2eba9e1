"""Tests for glyph export."""

import io

import pytest
from PIL import Image

from emojied.core.errors import CapabilityUnavailable, EncodingFailure
from emojied.core.rasterizer import PillowCanvas, Rasterizer, filename_for
from emojied.utils.file_sink import DirectorySink, RecordingSink

from conftest import StubCanvas


class TestFilename:
    @pytest.mark.parametrize("glyph, expected", [
        ("🐍", "emoji-1f40d.png"),
        ("😀", "emoji-1f600.png"),
        ("❤️", "emoji-2764.png"),
        ("☕", "emoji-2615.png"),
    ])
    def test_uses_first_code_point(self, glyph, expected):
        assert filename_for(glyph) == expected

    def test_same_glyph_same_filename(self, rasterizer, sink):
        rasterizer.render("🐍")
        rasterizer.render("🐍")
        assert sink.filenames == ["emoji-1f40d.png", "emoji-1f40d.png"]


class TestRasterizer:
    def test_success_returns_message_and_saves(self, rasterizer, sink, canvas):
        assert rasterizer.render("🎉") == "Saved 🎉 as PNG"
        assert canvas.rendered == ["🎉"]
        assert sink.saved[0][0] == "emoji-1f389.png"
        assert sink.saved[0][1].startswith(b"\x89PNG")

    def test_empty_glyph_is_ignored(self, rasterizer, sink):
        assert rasterizer.render("") is None
        assert sink.saved == []

    @pytest.mark.parametrize("error", [CapabilityUnavailable("no ctx"), EncodingFailure("no blob")])
    def test_canvas_failure_returns_none(self, error):
        sink = RecordingSink()
        rasterizer = Rasterizer(StubCanvas(error=error), sink)
        assert rasterizer.render("🐍") is None
        assert sink.saved == []

    def test_sink_failure_returns_none(self, canvas):
        def full_disk(_data, _filename):
            raise OSError("No space left on device")

        assert Rasterizer(canvas, full_disk).render("🐍") is None


class TestPillowCanvas:
    @pytest.fixture
    def pillow_canvas(self):
        # No system fonts: exercises Pillow's built-in font
        return PillowCanvas(font_paths=[])

    def test_renders_square_transparent_png(self, pillow_canvas):
        data = pillow_canvas.render_png("🐍")
        image = Image.open(io.BytesIO(data))
        assert image.format == "PNG"
        assert image.size == (128, 128)
        assert image.mode == "RGBA"

    def test_glyph_is_drawn_near_the_centre(self, pillow_canvas):
        image = Image.open(io.BytesIO(pillow_canvas.render_png("A")))
        left, top, right, bottom = image.getchannel("A").getbbox()
        assert abs((left + right) / 2 - 64) <= 16
        assert abs((top + bottom) / 2 - 64) <= 16

    def test_font_size_follows_scale(self):
        assert PillowCanvas(size=128, font_scale=0.8, font_paths=[]).font_size == 102
        assert PillowCanvas(size=64, font_scale=0.5, font_paths=[]).font_size == 32

    def test_missing_font_paths_are_skipped(self, tmp_path):
        canvas = PillowCanvas(font_paths=[tmp_path / "missing.ttf"])
        assert canvas.render_png("A").startswith(b"\x89PNG")

    @pytest.mark.parametrize("kwargs", [{"size": 0}, {"font_scale": 0.0}, {"font_scale": 1.5}])
    def test_rejects_bad_geometry(self, kwargs):
        with pytest.raises(ValueError):
            PillowCanvas(font_paths=[], **kwargs)

    def test_end_to_end_into_directory(self, tmp_path, pillow_canvas):
        rasterizer = Rasterizer(pillow_canvas, DirectorySink(tmp_path))
        assert rasterizer.render("🐍") == "Saved 🐍 as PNG"
        saved = tmp_path / "emoji-1f40d.png"
        assert saved.exists()
        assert Image.open(saved).size == (128, 128)
