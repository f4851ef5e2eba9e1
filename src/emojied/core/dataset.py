# -*- coding: utf-8 -*-
"""
src/emojied/core/dataset.py

Defines the immutable glyph dataset and its JSON loader.

The dataset is a JSON array of objects with at least the keys `char`, `name`
and `codes`, in the format of the `emoji.json` package. Any extra keys
(category, group, subgroup...) are ignored.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, Sequence, Tuple, Union

from .errors import DatasetError

logger = logging.getLogger(__name__)

DEFAULT_DATASET_PATH = Path(__file__).resolve().parent.parent / "data" / "emoji.json"


@dataclass(frozen=True)
class GlyphRecord:
    """A single emoji entry."""
    char: str
    name: str
    codes: str


class Dataset(Sequence[GlyphRecord]):
    """
    An ordered, read-only collection of GlyphRecord objects.

    The constructor validates that every record has a non-empty char, name and
    codes value and that `codes` is unique across the whole collection.
    """

    def __init__(self, records: Iterable[GlyphRecord]):
        self._records: Tuple[GlyphRecord, ...] = tuple(records)
        self._validate()

    def _validate(self):
        seen = set()
        for position, record in enumerate(self._records):
            if not record.char or not record.name.strip() or not record.codes:
                raise DatasetError(f"Record #{position} has an empty field: {record!r}")
            if record.codes in seen:
                raise DatasetError(f"Duplicate codes '{record.codes}' at record #{position}")
            seen.add(record.codes)

    def __getitem__(self, index):
        return self._records[index]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[GlyphRecord]:
        return iter(self._records)

    def __repr__(self) -> str:
        return f"Dataset({len(self._records)} records)"

    def by_codes(self, codes: str) -> GlyphRecord:
        """Returns the record with the given codes identifier."""
        for record in self._records:
            if record.codes == codes:
                return record
        raise KeyError(codes)


def parse_records(raw_records: List[dict]) -> Dataset:
    """
    Builds a Dataset from already-decoded JSON objects.

    Args:
        raw_records (List[dict]): Objects with `char`, `name` and `codes` keys.

    Returns:
        Dataset: The validated dataset.

    Raises:
        DatasetError: If the payload is not a list of objects or a record is invalid.
    """
    if not isinstance(raw_records, list):
        raise DatasetError(f"Expected a JSON array of records, got {type(raw_records).__name__}")

    records = []
    for position, item in enumerate(raw_records):
        if not isinstance(item, dict):
            raise DatasetError(f"Record #{position} is not an object")
        try:
            records.append(GlyphRecord(
                char=str(item["char"]),
                name=str(item["name"]),
                codes=str(item["codes"]),
            ))
        except KeyError as e:
            raise DatasetError(f"Record #{position} is missing the key {e}") from e
    return Dataset(records)


def load_dataset(path: Union[str, Path]) -> Dataset:
    """
    Loads and validates a glyph dataset from a JSON file.

    Raises:
        DatasetError: If the file cannot be read or parsed, or fails validation.
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            payload = json.load(f)
    except FileNotFoundError as e:
        raise DatasetError(f"Dataset file not found at '{path}'") from e
    except (OSError, json.JSONDecodeError) as e:
        raise DatasetError(f"Could not read dataset '{path}': {e}") from e

    dataset = parse_records(payload)
    logger.info(f"Loaded {len(dataset)} glyphs from '{path}'.")
    return dataset


def load_default_dataset() -> Dataset:
    """Loads the dataset bundled with the package."""
    return load_dataset(DEFAULT_DATASET_PATH)
