"""Tests for the glyph dataset and its loader."""

import dataclasses
import json

import pytest

from emojied.core.dataset import (
    Dataset, GlyphRecord, load_dataset, load_default_dataset, parse_records,
)
from emojied.core.errors import DatasetError


def write_json(path, payload):
    path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
    return path


class TestLoadDataset:
    def test_loads_records_in_order(self, tmp_path):
        path = write_json(tmp_path / "emoji.json", [
            {"codes": "1F600", "char": "😀", "name": "grinning face", "category": "Smileys"},
            {"codes": "1F40D", "char": "🐍", "name": "snake", "group": "Animals"},
        ])
        dataset = load_dataset(path)
        assert list(dataset) == [
            GlyphRecord(char="😀", name="grinning face", codes="1F600"),
            GlyphRecord(char="🐍", name="snake", codes="1F40D"),
        ]

    def test_missing_file(self, tmp_path):
        with pytest.raises(DatasetError, match="not found"):
            load_dataset(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("[{", encoding="utf-8")
        with pytest.raises(DatasetError):
            load_dataset(path)

    def test_bundled_dataset(self):
        dataset = load_default_dataset()
        assert len(dataset) > 100
        assert dataset.by_codes("1F600").char == "😀"
        assert dataset.by_codes("1F40D").name == "snake"


class TestValidation:
    def test_rejects_non_list(self):
        with pytest.raises(DatasetError):
            parse_records({"char": "😀"})

    def test_rejects_missing_key(self):
        with pytest.raises(DatasetError, match="name"):
            parse_records([{"char": "😀", "codes": "1F600"}])

    def test_rejects_duplicate_codes(self):
        with pytest.raises(DatasetError, match="Duplicate"):
            parse_records([
                {"char": "😀", "name": "grinning face", "codes": "1F600"},
                {"char": "😀", "name": "grinning again", "codes": "1F600"},
            ])

    @pytest.mark.parametrize("record", [
        {"char": "", "name": "nothing", "codes": "0"},
        {"char": "😀", "name": "  ", "codes": "1F600"},
        {"char": "😀", "name": "grinning face", "codes": ""},
    ])
    def test_rejects_empty_fields(self, record):
        with pytest.raises(DatasetError):
            parse_records([record])


class TestImmutability:
    def test_records_are_frozen(self, sample_dataset):
        with pytest.raises(dataclasses.FrozenInstanceError):
            sample_dataset[0].name = "changed"

    def test_dataset_has_no_item_assignment(self, sample_dataset):
        with pytest.raises(TypeError):
            sample_dataset[0] = GlyphRecord(char="x", name="x", codes="x")

    def test_source_list_changes_do_not_leak(self):
        records = [GlyphRecord(char="😀", name="grinning face", codes="1F600")]
        dataset = Dataset(records)
        records.append(GlyphRecord(char="🐍", name="snake", codes="1F40D"))
        assert len(dataset) == 1

    def test_by_codes_unknown(self, sample_dataset):
        with pytest.raises(KeyError):
            sample_dataset.by_codes("FFFF")
