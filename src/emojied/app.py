# -*- coding: utf-8 -*-
"""
src/emojied/app.py

Core application controller for Emojied.

This module contains the main application class, `EmojiedApp`, which loads
the configuration and the glyph dataset, builds the matcher, query pipeline,
rasterizer and interaction controller, and wires them to the search window.
"""

import logging
from typing import Optional

from .config import Config, config as default_config
from .core.dataset import Dataset, load_dataset, load_default_dataset
from .core.interaction import InteractionController
from .core.matcher import Matcher
from .core.query_pipeline import QueryPipeline
from .core.rasterizer import PillowCanvas, Rasterizer, get_system_font_candidates
from .gui.main_window import EmojiSearchWindow
from .gui.qt_scheduler import QtScheduler
from .utils.clipboard_manager import copy_to_clipboard
from .utils.file_sink import DirectorySink

logger = logging.getLogger(__name__)


class EmojiedApp:
    """
    The main application controller. Owns the engine objects and the window.
    """

    def __init__(self, config: Optional[Config] = None, dataset: Optional[Dataset] = None):
        """
        Args:
            config (Config, optional): Settings; defaults to the user's config.ini.
            dataset (Dataset, optional): Glyphs to search; defaults to the
                                         configured or bundled dataset.

        Raises:
            DatasetError: If the dataset cannot be loaded.
        """
        self.config = config or default_config
        self.dataset = dataset if dataset is not None else self.load_dataset()

        self.matcher = Matcher(self.dataset, threshold=self.config.threshold)
        self.pipeline = QueryPipeline(self.matcher, result_cap=self.config.result_cap)
        self.rasterizer = self.build_rasterizer()
        self.scheduler = QtScheduler()
        self.controller = InteractionController(
            clipboard=copy_to_clipboard,
            rasterizer=self.rasterizer,
            scheduler=self.scheduler,
            notification_ms=self.config.notification_ms,
        )
        self.window = EmojiSearchWindow(self.pipeline, self.controller)

    def load_dataset(self) -> Dataset:
        """Loads the configured dataset, or the bundled one if none is set."""
        path = self.config.dataset_path
        if path is None:
            return load_default_dataset()
        return load_dataset(path)

    def build_rasterizer(self) -> Rasterizer:
        font_paths = get_system_font_candidates()
        if self.config.font_path is not None:
            font_paths.insert(0, self.config.font_path)
        canvas = PillowCanvas(
            size=self.config.canvas_size,
            font_scale=self.config.font_scale,
            font_paths=font_paths,
        )
        sink = DirectorySink(self.config.export_dir)
        logger.info(f"Exports will be saved to '{sink.directory}'.")
        return Rasterizer(canvas, sink)

    def show(self):
        self.window.show()
        self.window.search_input.setFocus()
