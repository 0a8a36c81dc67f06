"""Tests for variant configuration loading."""
import json
import logging

import pytest

from poker_ranking.config import variants
from poker_ranking.config.variants import (
    ShowdownRule, VariantConfigError, VariantConfigLoader, get_variant_config
)
from poker_ranking.evaluation.evaluator import evaluate
from poker_ranking.evaluation.exceptions import EvaluationError
from tests.test_helpers import board, texas


def write_config(directory, name, data):
    path = directory / f"{name}.json"
    path.write_text(json.dumps(data))
    return path


def test_packaged_variants_are_loaded_at_import():
    assert variants.variant_config_loader._loaded
    assert get_variant_config("texas").id == "texas"
    assert get_variant_config("omaha").id == "omaha"


def test_texas_config():
    config = get_variant_config("texas")
    assert config.name == "Texas Hold'em"
    assert config.hole_cards == 2
    assert (config.board_min, config.board_max) == (3, 5)
    assert config.showdown == ShowdownRule(any_cards=5)
    assert config.showdown.hand_size == 5


def test_omaha_config():
    config = get_variant_config("omaha")
    assert config.hole_cards == 4
    assert config.showdown == ShowdownRule(hole_cards=2, community_cards=3)
    assert config.showdown.hand_size == 5


def test_unknown_variant():
    with pytest.raises(VariantConfigError):
        get_variant_config("razz")


def test_config_error_is_not_a_hand_error():
    assert issubclass(VariantConfigError, LookupError)
    assert not issubclass(VariantConfigError, EvaluationError)


def test_broken_packaged_config_is_a_config_error(tmp_path, monkeypatch, caplog):
    """A valid hand is never blamed for a variant file that failed to load."""
    (tmp_path / "texas.json").write_text("{not json")
    monkeypatch.setattr(variants, "variant_config_loader", VariantConfigLoader(tmp_path))

    with caplog.at_level(logging.ERROR):
        with pytest.raises(VariantConfigError, match="texas"):
            evaluate(board("Qh Jh Th 2c 3d"), texas("Ah Kh"))

    assert "texas.json" in caplog.text


def test_custom_config_dir(tmp_path):
    write_config(tmp_path, "pineapple", {
        "id": "pineapple",
        "name": "Pineapple",
        "hole_cards": 3,
        "board": {"min": 3, "max": 5},
        "showdown": {"anyCards": 5},
    })
    loader = VariantConfigLoader(tmp_path)
    config = loader.get_config("pineapple")
    assert config.hole_cards == 3
    assert config.description == ""


def test_id_defaults_to_file_name(tmp_path):
    write_config(tmp_path, "short", {"hole_cards": 2, "showdown": {"anyCards": 5}})
    config = VariantConfigLoader(tmp_path).get_config("short")
    assert (config.board_min, config.board_max) == (3, 5)


def test_malformed_files_are_skipped(tmp_path, caplog):
    (tmp_path / "broken.json").write_text("{not json")
    write_config(tmp_path, "missing", {"id": "missing", "showdown": {"anyCards": 5}})
    write_config(tmp_path, "six", {"id": "six", "hole_cards": 2, "showdown": {"anyCards": 6}})
    write_config(tmp_path, "texas", {"id": "texas", "hole_cards": 2, "showdown": {"anyCards": 5}})

    loader = VariantConfigLoader(tmp_path)
    with caplog.at_level(logging.ERROR):
        loader.load_all_configs()

    assert loader.get_config("texas").hole_cards == 2
    for variant in ("broken", "missing", "six"):
        with pytest.raises(VariantConfigError):
            loader.get_config(variant)
    assert "broken.json" in caplog.text
    assert "six.json" in caplog.text


def test_missing_config_dir(tmp_path):
    loader = VariantConfigLoader(tmp_path / "nowhere")
    with pytest.raises(FileNotFoundError):
        loader.load_all_configs()


def test_loading_is_idempotent(tmp_path):
    write_config(tmp_path, "texas", {"id": "texas", "hole_cards": 2, "showdown": {"anyCards": 5}})
    loader = VariantConfigLoader(tmp_path)
    loader.load_all_configs()
    write_config(tmp_path, "omaha", {
        "id": "omaha", "hole_cards": 4, "showdown": {"holeCards": 2, "communityCards": 3}
    })
    loader.load_all_configs()
    with pytest.raises(VariantConfigError):
        loader.get_config("omaha")
