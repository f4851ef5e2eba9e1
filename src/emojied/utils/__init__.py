# -*- coding: utf-8 -*-
"""
The Utilities Package for Emojied.

Host capabilities that the core consumes through plain callables:

- clipboard_manager: copying text to the system clipboard (pyperclip).
- file_sink: saving exported PNG files.
"""

from .clipboard_manager import copy_to_clipboard
from .file_sink import DirectorySink, RecordingSink, get_downloads_dir

__all__ = [
    "DirectorySink",
    "RecordingSink",
    "copy_to_clipboard",
    "get_downloads_dir",
]
