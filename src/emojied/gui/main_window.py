# -*- coding: utf-8 -*-
"""
src/emojied/gui/main_window.py

Defines the EmojiSearchWindow widget, the application's only window.

The window owns no state of its own. Typing feeds the QueryPipeline, the mode
switch and glyph buttons drive the InteractionController, and both are
observed to redraw the result grid and the toast notification.
"""

import logging
from typing import List, Optional

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QCheckBox, QGridLayout, QHBoxLayout, QLabel, QLineEdit, QPushButton,
    QVBoxLayout, QWidget,
)

from ..core.dataset import GlyphRecord
from ..core.interaction import InteractionController, InteractionState, Mode
from ..core.query_pipeline import QueryPipeline

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Emojied"
GRID_COLUMNS = 8
GLYPH_BUTTON_SIZE = 64
ABOUT_TEXT = (
    "This is an ad-free emoji search tool. Copy emojis or download as PNG "
    "- you can do both, no hassle."
)


class EmojiSearchWindow(QWidget):
    """
    Search field, copy/export switch, result grid and notification toast.
    """

    def __init__(self, pipeline: QueryPipeline, controller: InteractionController, parent: QWidget = None):
        """
        Args:
            pipeline (QueryPipeline): Receives the query text and supplies results.
            controller (InteractionController): Handles mode and glyph activation.
            parent (QWidget, optional): The parent widget. Defaults to None.
        """
        super().__init__(parent)
        self.pipeline = pipeline
        self.controller = controller
        self.glyph_buttons: List[QPushButton] = []

        self._setup_window_properties()
        self._setup_ui()

        self._unsubscribers = [
            self.pipeline.subscribe(self._on_results_changed),
            self.controller.subscribe(self._on_state_changed),
        ]
        self._on_results_changed(self.pipeline.results)
        self._on_state_changed(self.controller.state)

    def _setup_window_properties(self):
        """Sets the window title, size and styling."""
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(760, 620)
        self.setStyleSheet("""
            QWidget {
                background-color: #fefefe;
                color: #333333;
                font-family: 'Inter', sans-serif;
            }
            QLineEdit {
                font-size: 16px;
                padding: 8px 14px;
                border: 1.5px solid #dddddd;
                border-radius: 15px;
            }
            QLineEdit:focus {
                border-color: #4f46e5;
            }
            QPushButton#glyph {
                background-color: #ffffff;
                border: none;
                border-radius: 14px;
            }
            QPushButton#glyph:hover {
                background-color: #eef2ff;
            }
            QPushButton#about {
                color: #4f46e5;
                font-weight: 600;
                border: none;
                padding: 4px 8px;
            }
            QLabel#toast {
                background-color: #4f46e5;
                color: #ffffff;
                font-weight: 600;
                padding: 10px 22px;
                border-radius: 18px;
            }
            QLabel#about_info {
                background-color: #f9fafb;
                border: 1px solid #dddddd;
                border-radius: 12px;
                padding: 12px 18px;
                color: #555555;
            }
        """)

    def _setup_ui(self):
        """Creates and arranges the widgets within the window."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(32, 16, 32, 24)
        layout.setSpacing(12)

        # About button and its popup text
        top_row = QHBoxLayout()
        top_row.addStretch()
        self.about_button = QPushButton("About")
        self.about_button.setObjectName("about")
        self.about_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self.about_button.clicked.connect(self.toggle_about)
        top_row.addWidget(self.about_button)
        layout.addLayout(top_row)

        self.about_label = QLabel(ABOUT_TEXT)
        self.about_label.setObjectName("about_info")
        self.about_label.setWordWrap(True)
        self.about_label.setVisible(False)
        layout.addWidget(self.about_label, alignment=Qt.AlignmentFlag.AlignRight)

        # Copy / Save as PNG switch
        switch_row = QHBoxLayout()
        switch_row.addStretch()
        switch_row.addWidget(QLabel("Copy Emoji"))
        self.mode_switch = QCheckBox()
        self.mode_switch.setCursor(Qt.CursorShape.PointingHandCursor)
        self.mode_switch.toggled.connect(self._on_mode_switch_toggled)
        switch_row.addWidget(self.mode_switch)
        switch_row.addWidget(QLabel("Save as PNG"))
        switch_row.addStretch()
        layout.addLayout(switch_row)

        title = QLabel("Emojied 🔎")
        title_font = QFont()
        title_font.setPointSize(36)
        title.setFont(title_font)
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(title)

        self.search_input = QLineEdit()
        self.search_input.setPlaceholderText("Type a word or mood...")
        self.search_input.setAccessibleName("Search emojis by name or mood")
        self.search_input.setMaximumWidth(400)
        self.search_input.textChanged.connect(self._on_query_changed)
        layout.addWidget(self.search_input, alignment=Qt.AlignmentFlag.AlignHCenter)

        # Results
        self.empty_label = QLabel("No emojis found")
        self.empty_label.setStyleSheet("color: #999999; font-size: 20px;")
        self.empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.empty_label.setVisible(False)
        layout.addWidget(self.empty_label)

        results_container = QWidget()
        self.results_grid = QGridLayout(results_container)
        self.results_grid.setSpacing(18)
        layout.addWidget(results_container, alignment=Qt.AlignmentFlag.AlignHCenter)
        layout.addStretch()

        self.toast = QLabel()
        self.toast.setObjectName("toast")
        self.toast.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.toast.setVisible(False)
        layout.addWidget(self.toast, alignment=Qt.AlignmentFlag.AlignHCenter)

        self.setLayout(layout)

    # --- Event handlers ---

    def toggle_about(self):
        self.about_label.setVisible(not self.about_label.isVisible())

    def _on_query_changed(self, text: str):
        self.pipeline.raw = text

    def _on_mode_switch_toggled(self, checked: bool):
        self.controller.set_mode(Mode.EXPORT if checked else Mode.COPY)

    def _on_glyph_clicked(self, record: GlyphRecord):
        logger.debug(f"Glyph clicked: {record.name} ({record.codes})")
        self.controller.activate(record)

    # --- Observers ---

    def _on_results_changed(self, _results: List[GlyphRecord]):
        self._clear_grid()
        for position, record in enumerate(self.pipeline.display_results):
            button = self._make_glyph_button(record)
            row, column = divmod(position, GRID_COLUMNS)
            self.results_grid.addWidget(button, row, column)
            self.glyph_buttons.append(button)
        self.empty_label.setVisible(self.pipeline.is_empty_search)

    def _on_state_changed(self, state: InteractionState):
        export_mode = state.mode is Mode.EXPORT
        if self.mode_switch.isChecked() != export_mode:
            self.mode_switch.blockSignals(True)
            self.mode_switch.setChecked(export_mode)
            self.mode_switch.blockSignals(False)

        if state.notification is None:
            self.toast.setVisible(False)
        else:
            self.toast.setText(state.notification.message)
            self.toast.setVisible(True)

    # --- Helpers ---

    def _make_glyph_button(self, record: GlyphRecord) -> QPushButton:
        button = QPushButton(record.char)
        button.setObjectName("glyph")
        button.setToolTip(record.name)
        button.setFixedSize(GLYPH_BUTTON_SIZE, GLYPH_BUTTON_SIZE)
        button.setCursor(Qt.CursorShape.PointingHandCursor)
        glyph_font = QFont()
        glyph_font.setPointSize(28)
        button.setFont(glyph_font)
        button.clicked.connect(lambda _checked=False, r=record: self._on_glyph_clicked(r))
        return button

    def _clear_grid(self):
        while self.results_grid.count():
            item = self.results_grid.takeAt(0)
            widget: Optional[QWidget] = item.widget()
            if widget is not None:
                widget.deleteLater()
        self.glyph_buttons = []

    def closeEvent(self, event):
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []
        super().closeEvent(event)
