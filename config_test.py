"""
Configuration validation and environment parsing
"""
from pathlib import Path

import pytest

from config import ConfigurationError, DEFAULT_IDENTITIES, DesktopConfiguration


def test_defaults_describe_ocean_board():
    config = DesktopConfiguration().validate()

    assert config.board_size == 20
    assert config.pair_count == 10
    assert config.identities == DEFAULT_IDENTITIES
    assert config.flip_back_delay_ms == 800
    assert config.window_title == "Ocean Animals Matching Game"
    assert config.is_validated


@pytest.mark.parametrize("rows,columns", [(3, 3), (1, 5)])
def test_odd_board_is_rejected(rows, columns):
    with pytest.raises(ConfigurationError, match="odd"):
        DesktopConfiguration(rows=rows, columns=columns).validate()


def test_identity_count_must_fill_board():
    with pytest.raises(ConfigurationError):
        DesktopConfiguration(rows=2, columns=2, identities=("A", "B", "C")).validate()


def test_duplicate_identities_are_rejected():
    with pytest.raises(ConfigurationError, match="distinct"):
        DesktopConfiguration(rows=2, columns=2, identities=("A", "A")).validate()


@pytest.mark.parametrize("kwargs", [
    {"rows": 0},
    {"columns": -2},
    {"flip_back_delay_ms": -1},
    {"cell_size": 0},
])
def test_out_of_range_settings_are_rejected(kwargs):
    with pytest.raises(ConfigurationError):
        DesktopConfiguration(**kwargs).validate()


def test_from_env_reads_match_variables(tmp_path):
    env = {
        "MATCH_ROWS": "2",
        "MATCH_COLUMNS": "3",
        "MATCH_FLIP_DELAY_MS": "250",
        "MATCH_SEED": "11",
        "MATCH_IDENTITIES": "crab, shark ,turtle",
        "MATCH_IMAGE_DIR": str(tmp_path),
        "MATCH_WINDOW_TITLE": "Reef",
        "MATCH_LOG_LEVEL": "debug",
    }

    config = DesktopConfiguration.from_env(env)

    assert (config.rows, config.columns) == (2, 3)
    assert config.flip_back_delay_ms == 250
    assert config.seed == 11
    assert config.identities == ("crab", "shark", "turtle")
    assert config.image_dir == Path(tmp_path)
    assert config.window_title == "Reef"
    assert config.log_level == "DEBUG"


def test_from_env_uses_defaults_when_unset():
    config = DesktopConfiguration.from_env({})

    assert config.board_size == 20
    assert config.seed is None
    assert config.image_dir is not None and config.image_dir.name == "images"


def test_from_env_rejects_non_integer():
    with pytest.raises(ConfigurationError, match="MATCH_ROWS"):
        DesktopConfiguration.from_env({"MATCH_ROWS": "four"})


def test_from_env_validates_board():
    with pytest.raises(ConfigurationError):
        DesktopConfiguration.from_env({"MATCH_ROWS": "3", "MATCH_COLUMNS": "3"})


@pytest.mark.parametrize("level", ["BASIC_FORMAT", "verbose", "root"])
def test_from_env_rejects_unknown_log_level(level):
    with pytest.raises(ConfigurationError, match="MATCH_LOG_LEVEL"):
        DesktopConfiguration.from_env({"MATCH_LOG_LEVEL": level})


def test_from_env_accepts_level_names_in_any_case():
    assert DesktopConfiguration.from_env({"MATCH_LOG_LEVEL": " warning "}).log_level == "WARNING"
