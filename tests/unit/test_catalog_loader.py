"""카탈로그 로더 테스트"""

from pathlib import Path

import pytest

from kitfinder.catalog import build_catalog, load_catalog, parse_kits_text, parse_kits_yaml
from kitfinder.core.exceptions import (
    CatalogException,
    CatalogNotFoundException,
    CatalogParseException,
)
from kitfinder.engine import Kit
from kitfinder.utils.hash_utils import hash_string
from tests.fixtures.kits import SAMPLE_KITS_TEXT, SAMPLE_KITS_YAML


class TestParseKitsText:
    def test_skips_comments_and_blank_lines(self):
        kits = parse_kits_text(SAMPLE_KITS_TEXT)
        assert [k.name for k in kits] == ["Forest Kit", "Nether Kit", "Ocean Kit", "Desert Kit"]
        assert kits[0].blocks == ("Grass Block", "Oak Planks", "Stone")

    def test_empty_fields_dropped(self):
        kits = parse_kits_text("Kit A, , Stone,  ,\n , , \n")
        assert kits == [Kit(name="Kit A", blocks=("Stone",))]

    def test_name_only_kit(self):
        kits = parse_kits_text("Empty Kit")
        assert kits == [Kit(name="Empty Kit", blocks=())]

    def test_windows_line_endings(self):
        kits = parse_kits_text("A, Stone\r\nB, Sand\r\n")
        assert [k.blocks for k in kits] == [("Stone",), ("Sand",)]

    def test_block_text_kept_as_written(self):
        kits = parse_kits_text("Kit, Oak Planks")
        assert kits[0].blocks == ("Oak Planks",)


class TestParseKitsYaml:
    def test_valid_document(self):
        kits = parse_kits_yaml(SAMPLE_KITS_YAML)
        assert kits[0] == Kit(name="Forest Kit", blocks=("Grass Block", "Oak Planks", "Stone"))
        assert kits[1] == Kit(name="desert kit", blocks=("Sand", "Cactus"))

    def test_top_level_list(self):
        kits = parse_kits_yaml("- name: A\n  blocks: [Stone]\n")
        assert kits == [Kit(name="A", blocks=("Stone",))]

    def test_empty_document(self):
        assert parse_kits_yaml("") == []

    def test_invalid_yaml(self):
        with pytest.raises(CatalogParseException) as exc_info:
            parse_kits_yaml("kits: [unclosed")
        assert exc_info.value.error_code == "CATALOG_PARSE_ERROR"

    def test_schema_mismatch(self):
        with pytest.raises(CatalogParseException):
            parse_kits_yaml("kits:\n  - name: '   '\n    blocks: [Stone]\n")

    def test_scalar_document(self):
        with pytest.raises(CatalogParseException):
            parse_kits_yaml("just a string")


class TestLoadCatalog:
    def test_sorted_case_insensitive(self, tmp_path: Path):
        path = tmp_path / "kits.txt"
        path.write_text("beta, Stone\nAlpha, Sand\ngamma, Dirt\n", encoding="utf-8")

        catalog = load_catalog(str(path))

        assert [k.name for k in catalog.kits] == ["Alpha", "beta", "gamma"]
        assert len(catalog) == 3
        assert catalog.source == str(path)

    def test_fingerprint_is_content_hash(self, catalog_file: Path):
        catalog = load_catalog(str(catalog_file))
        assert catalog.fingerprint == hash_string(SAMPLE_KITS_TEXT)

    def test_yaml_suffix(self, tmp_path: Path):
        path = tmp_path / "kits.yml"
        path.write_text(SAMPLE_KITS_YAML, encoding="utf-8")

        catalog = load_catalog(str(path))
        assert [k.name for k in catalog.kits] == ["desert kit", "Forest Kit"]

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(CatalogNotFoundException) as exc_info:
            load_catalog(str(tmp_path / "missing.txt"))
        assert isinstance(exc_info.value, CatalogException)
        assert exc_info.value.error_code == "CATALOG_NOT_FOUND"

    def test_bundled_catalog_loads(self):
        catalog = load_catalog("resources/kits.txt")
        assert len(catalog) > 0


def test_build_catalog_from_text():
    catalog = build_catalog("Forest Kit, Stone")
    assert catalog.kits == (Kit(name="Forest Kit", blocks=("Stone",)),)
    assert catalog.source is None
