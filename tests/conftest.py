"""Shared fixtures for the Emojied test suite."""

from typing import Callable, List

import pytest

from emojied.core.dataset import Dataset, GlyphRecord
from emojied.core.errors import CapabilityUnavailable
from emojied.core.interaction import InteractionController
from emojied.core.matcher import Matcher
from emojied.core.query_pipeline import QueryPipeline
from emojied.core.rasterizer import GlyphCanvas, Rasterizer
from emojied.core.scheduler import Scheduler, TimerHandle
from emojied.utils.file_sink import RecordingSink

GRINNING = GlyphRecord(char="😀", name="grinning face", codes="1F600")
PARTY = GlyphRecord(char="🎉", name="party popper", codes="1F389")
SNAKE = GlyphRecord(char="🐍", name="snake", codes="1F40D")


class ManualTimer(TimerHandle):
    def __init__(self, due: float, callback: Callable[[], None]):
        self.due = due
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self):
        self.cancelled = True

    @property
    def active(self) -> bool:
        return not (self.cancelled or self.fired)


class ManualScheduler(Scheduler):
    """A scheduler whose clock only moves when the test calls advance()."""

    def __init__(self):
        self.current = 0.0
        self.timers: List[ManualTimer] = []

    def now(self) -> float:
        return self.current

    def call_later(self, delay_ms, callback):
        timer = ManualTimer(self.current + delay_ms, callback)
        self.timers.append(timer)
        return timer

    @property
    def pending(self) -> List[ManualTimer]:
        return [t for t in self.timers if t.active]

    def advance(self, ms: float):
        target = self.current + ms
        while True:
            due = [t for t in self.pending if t.due <= target]
            if not due:
                break
            timer = min(due, key=lambda t: t.due)
            self.current = timer.due
            timer.fired = True
            timer.callback()
        self.current = target


class RecordingClipboard:
    def __init__(self, succeed: bool = True):
        self.succeed = succeed
        self.copied: List[str] = []

    def __call__(self, text: str) -> bool:
        self.copied.append(text)
        return self.succeed


class StubCanvas(GlyphCanvas):
    """Returns fixed bytes, or raises the configured error."""

    def __init__(self, error: Exception = None):
        self.error = error
        self.rendered: List[str] = []

    def render_png(self, glyph: str) -> bytes:
        self.rendered.append(glyph)
        if self.error is not None:
            raise self.error
        return b"\x89PNG\r\n\x1a\n" + glyph.encode("utf-8")


@pytest.fixture
def sample_dataset():
    """The grinning face followed by 50 entries that share no letters with 'grin'."""
    filler = [
        GlyphRecord(char=chr(0x1F300 + i), name=f"symbol {i}", codes=f"{0x1F300 + i:X}")
        for i in range(50)
    ]
    return Dataset([GRINNING] + filler)


@pytest.fixture
def emotion_dataset():
    return Dataset([
        GlyphRecord(char="😃", name="grinning face with big eyes", codes="1F603"),
        GRINNING,
        GlyphRecord(char="😢", name="crying face", codes="1F622"),
        GlyphRecord(char="😭", name="loudly crying face", codes="1F62D"),
        GlyphRecord(char="😡", name="enraged face", codes="1F621"),
        GlyphRecord(char="🐱", name="cat face", codes="1F431"),
        GlyphRecord(char="😺", name="grinning cat", codes="1F63A"),
        PARTY,
        SNAKE,
        GlyphRecord(char="🔥", name="fire", codes="1F525"),
    ])


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def clipboard():
    return RecordingClipboard()


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def canvas():
    return StubCanvas()


@pytest.fixture
def rasterizer(canvas, sink):
    return Rasterizer(canvas, sink)


@pytest.fixture
def controller(clipboard, rasterizer, scheduler):
    return InteractionController(clipboard, rasterizer, scheduler, notification_ms=1500)


@pytest.fixture
def pipeline(emotion_dataset):
    return QueryPipeline(Matcher(emotion_dataset), result_cap=40)


@pytest.fixture
def unavailable_canvas():
    return StubCanvas(error=CapabilityUnavailable("no canvas"))
