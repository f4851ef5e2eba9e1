# -*- coding: utf-8 -*-
"""
src/emojied/core/matcher.py

This module defines the Matcher class, responsible for ranking the glyph
dataset against a free-text query using approximate string matching.
"""

import logging
from typing import List, Optional, Tuple

from rapidfuzz import fuzz
from rapidfuzz.utils import default_process

from .dataset import Dataset, GlyphRecord

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 0.3
# Distances are rounded so that a similarity of exactly 70 compares equal to a
# threshold of 0.3 instead of losing to float noise.
_DISTANCE_PRECISION = 6


def normalize(text: str) -> str:
    """Lower-cases, folds non-alphanumerics to spaces and trims."""
    return default_process(text)


def distance(query: str, name: str) -> float:
    """
    Approximate-match distance between two normalized strings.

    The query is aligned against the best window of the name
    (`partial_ratio`), so a prefix or word of the name matches exactly. A
    query longer than the name is compared as a whole (`ratio`) so that long
    queries do not match every short name they happen to contain.

    Returns:
        A float between 0.0 (exact) and 1.0 (completely dissimilar).
    """
    if not query or not name:
        return 1.0
    if len(query) <= len(name):
        similarity = fuzz.partial_ratio(query, name)
    else:
        similarity = fuzz.ratio(query, name)
    return round(1.0 - similarity / 100.0, _DISTANCE_PRECISION)


class SearchIndex:
    """
    Read-only lookup structure derived from a Dataset.

    Holds every record name in normalized form, in dataset order, so the
    per-keystroke search does not re-normalize the whole dataset.
    """

    def __init__(self, dataset: Dataset):
        self.dataset = dataset
        self.entries: Tuple[Tuple[GlyphRecord, str], ...] = tuple(
            (record, normalize(record.name)) for record in dataset
        )

    def __len__(self) -> int:
        return len(self.entries)


class Matcher:
    """
    Answers ranked fuzzy queries against the `name` field of a glyph dataset.
    """

    def __init__(self, dataset: Dataset, threshold: float = DEFAULT_THRESHOLD):
        """
        Args:
            dataset (Dataset): The glyphs to search.
            threshold (float): Maximum accepted distance, 0.0 (exact matches
                               only) to 1.0 (everything).
        """
        if not 0.0 <= threshold <= 1.0:
            raise ValueError(f"threshold must be within [0, 1], got {threshold}")
        self.threshold = threshold
        self.index: Optional[SearchIndex] = None
        self.rebuild(dataset)

    @property
    def dataset(self) -> Dataset:
        return self.index.dataset

    def rebuild(self, dataset: Dataset):
        """Rebuilds the search index for a new dataset."""
        self.index = SearchIndex(dataset)
        logger.debug(f"Search index built with {len(self.index)} entries.")

    def score(self, query: str, record: GlyphRecord) -> float:
        """Distance between `query` and the record's name (0.0 is exact)."""
        return distance(normalize(query), normalize(record.name))

    def search(self, query: str) -> List[GlyphRecord]:
        """
        Finds the records whose name approximately matches the query.

        Args:
            query (str): Free text typed by the user.

        Returns:
            The matching records, best match first. Records with the same
            distance keep their dataset order. An empty or blank query, or a
            query with nothing to match, yields an empty list.
        """
        if not query.strip():
            return []

        term = normalize(query)
        if not term:
            return []

        scored = []
        for record, name in self.index.entries:
            dist = distance(term, name)
            if dist <= self.threshold:
                scored.append((dist, record))

        # sorted() is stable, which keeps dataset order among equal distances
        scored = sorted(scored, key=lambda item: item[0])
        return [record for _, record in scored]
