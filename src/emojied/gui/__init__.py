# -*- coding: utf-8 -*-
"""
The GUI Package for Emojied.

This package contains the user interface components, built using the PyQt6
framework:

- `main_window`: the search window (EmojiSearchWindow).
- `qt_scheduler`: the QTimer-backed scheduler used for notification expiry.

Import the modules directly, e.g. `from emojied.gui.main_window import
EmojiSearchWindow`. Nothing is imported here so that `qt_scheduler` can be
used with QtCore alone.
"""
