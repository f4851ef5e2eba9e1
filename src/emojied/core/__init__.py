# -*- coding: utf-8 -*-
"""
The Core Package for Emojied.

This package holds everything that has behaviour of its own, with no Qt
dependency, so it can be driven headless or from tests:

- `dataset`: the immutable glyph records and their JSON loader.
- `matcher`: fuzzy ranking of the dataset against a query.
- `query_pipeline`: the live query and its always-current result list.
- `interaction`: copy/export mode and the timed notification.
- `rasterizer`: glyph-to-PNG export.
- `scheduler`: the single-shot timer abstraction used for notifications.
"""

from .dataset import Dataset, GlyphRecord, load_dataset, load_default_dataset
from .errors import CapabilityUnavailable, DatasetError, EmojiedError, EncodingFailure
from .interaction import InteractionController, InteractionState, Mode, Notification
from .matcher import Matcher
from .query_pipeline import QueryPipeline
from .rasterizer import GlyphCanvas, PillowCanvas, Rasterizer, filename_for
from .scheduler import Scheduler, TimerHandle

__all__ = [
    "CapabilityUnavailable",
    "Dataset",
    "DatasetError",
    "EmojiedError",
    "EncodingFailure",
    "GlyphCanvas",
    "GlyphRecord",
    "InteractionController",
    "InteractionState",
    "Matcher",
    "Mode",
    "Notification",
    "PillowCanvas",
    "QueryPipeline",
    "Rasterizer",
    "Scheduler",
    "TimerHandle",
    "filename_for",
    "load_dataset",
    "load_default_dataset",
]
