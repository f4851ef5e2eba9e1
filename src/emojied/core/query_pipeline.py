# -*- coding: utf-8 -*-
"""
src/emojied/core/query_pipeline.py

Holds the live search query and keeps the result list in step with it.

Every assignment to `raw` recomputes the results synchronously before any
subscriber runs, so observers never see results that belong to an older
query.
"""

import logging
from typing import Callable, List

from .dataset import GlyphRecord
from .matcher import Matcher

logger = logging.getLogger(__name__)

DEFAULT_RESULT_CAP = 40

ResultsListener = Callable[[List[GlyphRecord]], None]


class QueryPipeline:
    """
    Owns the query string and the derived, ranked result list.
    """

    def __init__(self, matcher: Matcher, result_cap: int = DEFAULT_RESULT_CAP):
        """
        Args:
            matcher (Matcher): Used to rank the dataset for each query.
            result_cap (int): How many results `display_results` exposes.
        """
        if result_cap < 0:
            raise ValueError(f"result_cap must not be negative, got {result_cap}")
        self.matcher = matcher
        self.result_cap = result_cap
        self._raw = ""
        self._results: List[GlyphRecord] = []
        self._listeners: List[ResultsListener] = []

    @property
    def raw(self) -> str:
        return self._raw

    @raw.setter
    def raw(self, value: str):
        if value == self._raw:
            return
        self._raw = value
        self._recompute()

    @property
    def results(self) -> List[GlyphRecord]:
        """All matches for the current query, best first."""
        return list(self._results)

    @property
    def display_results(self) -> List[GlyphRecord]:
        """The first `result_cap` matches, in ranking order."""
        return self._results[:self.result_cap]

    @property
    def is_empty_search(self) -> bool:
        """True when the user typed something and nothing matched."""
        return bool(self._raw.strip()) and not self._results

    def clear(self):
        self.raw = ""

    def subscribe(self, listener: ResultsListener) -> Callable[[], None]:
        """
        Registers a callback invoked with the new results after each recompute.

        Returns:
            A function that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _recompute(self):
        if not self._raw.strip():
            self._results = []
        else:
            self._results = self.matcher.search(self._raw)
        logger.debug(f"Query '{self._raw}' -> {len(self._results)} results")
        self._notify()

    def _notify(self):
        snapshot = self.results
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception as e:
                logger.error(f"Error in results listener: {e}", exc_info=True)
