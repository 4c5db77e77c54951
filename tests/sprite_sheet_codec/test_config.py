"""Tests for sheet settings."""

import logging

import pytest
from sprite_sheet_codec.config import CONTROL_COLOR, DEFAULT_TILE_SIZE, SheetSettings


def test_settings_defaults():
    settings = SheetSettings()
    assert settings.tile_size == DEFAULT_TILE_SIZE
    assert settings.cell_height == DEFAULT_TILE_SIZE + 1
    assert settings.header_capacity == DEFAULT_TILE_SIZE * 3
    assert settings.control_color == CONTROL_COLOR
    assert settings.sheet_filename == "spritesheet_30.png"


@pytest.mark.parametrize("tile_size", [0, -5])
def test_settings_reject_non_positive_tile_size(tile_size):
    with pytest.raises(ValueError, match="Tile size must be positive"):
        SheetSettings(tile_size=tile_size)


def test_settings_reject_missing_header():
    with pytest.raises(ValueError, match="Header height must be positive"):
        SheetSettings(header_height=0)


def test_for_tile_size_falls_back_to_default(caplog):
    with caplog.at_level(logging.WARNING):
        settings = SheetSettings.for_tile_size(-1)

    assert settings.tile_size == DEFAULT_TILE_SIZE
    assert "Invalid tile size: -1" in caplog.text


def test_for_tile_size_keeps_valid_size():
    assert SheetSettings.for_tile_size(12).tile_size == 12
