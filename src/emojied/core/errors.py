# -*- coding: utf-8 -*-
"""
src/emojied/core/errors.py

Exception types shared by the core modules.

Only `DatasetError` ever reaches the application controller. The capability
errors are raised by the clipboard and canvas backends and are caught by the
rasterizer and the interaction controller, which log them and carry on.
"""


class EmojiedError(Exception):
    """Base class for all Emojied errors."""


class DatasetError(EmojiedError):
    """The glyph dataset is missing, malformed or violates an invariant."""


class CapabilityUnavailable(EmojiedError):
    """A host capability (clipboard, drawing canvas, font) could not be acquired."""


class EncodingFailure(EmojiedError):
    """The rendered bitmap could not be serialized to PNG."""
