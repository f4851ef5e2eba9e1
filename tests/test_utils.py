"""Tests for the clipboard and file-save capabilities."""

import pyperclip

from emojied.utils import clipboard_manager
from emojied.utils.file_sink import DirectorySink, RecordingSink


class TestClipboard:
    def test_copy_success(self, monkeypatch):
        copied = []
        monkeypatch.setattr(clipboard_manager.pyperclip, "copy", copied.append)
        assert clipboard_manager.copy_to_clipboard("🎉") is True
        assert copied == ["🎉"]

    def test_copy_failure(self, monkeypatch):
        def unavailable(_text):
            raise pyperclip.PyperclipException("no copy mechanism")

        monkeypatch.setattr(clipboard_manager.pyperclip, "copy", unavailable)
        assert clipboard_manager.copy_to_clipboard("🎉") is False

    def test_read_failure(self, monkeypatch):
        def unavailable():
            raise pyperclip.PyperclipException("no paste mechanism")

        monkeypatch.setattr(clipboard_manager.pyperclip, "paste", unavailable)
        assert clipboard_manager.read_clipboard() == ""


class TestSinks:
    def test_directory_sink_writes_and_overwrites(self, tmp_path):
        sink = DirectorySink(tmp_path / "exports")
        sink(b"one", "emoji-1f40d.png")
        target = sink(b"two", "emoji-1f40d.png")

        assert target == tmp_path / "exports" / "emoji-1f40d.png"
        assert target.read_bytes() == b"two"

    def test_directory_sink_strips_directories(self, tmp_path):
        target = DirectorySink(tmp_path)(b"x", "../escape.png")
        assert target == tmp_path / "escape.png"

    def test_recording_sink(self):
        sink = RecordingSink()
        sink(b"a", "first.png")
        sink(b"b", "second.png")
        assert sink.filenames == ["first.png", "second.png"]
        assert sink.saved[1] == ("second.png", b"b")
