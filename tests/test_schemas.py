"""Unit tests for search weights and configuration."""

import pytest

from tacpath.config import Config
from tacpath.schemas import SearchWeights


def test_search_weights_defaults():
    weights = SearchWeights()
    assert weights.danger_weight == 5.0
    assert weights.cover_weight == 0.4


def test_search_weights_from_config(monkeypatch):
    monkeypatch.setattr(Config, "DANGER_WEIGHT", 8.0)
    monkeypatch.setattr(Config, "COVER_WEIGHT", 0.1)

    weights = SearchWeights.from_config()

    assert weights.danger_weight == 8.0
    assert weights.cover_weight == 0.1


def test_config_validate_rejects_bad_weights(monkeypatch):
    Config.validate()

    monkeypatch.setattr(Config, "COVER_WEIGHT", 1.2)
    with pytest.raises(ValueError, match="COVER_WEIGHT"):
        Config.validate()

    monkeypatch.setattr(Config, "COVER_WEIGHT", 0.4)
    monkeypatch.setattr(Config, "DANGER_WEIGHT", -2.0)
    with pytest.raises(ValueError, match="DANGER_WEIGHT"):
        Config.validate()


def test_config_display_lists_weights():
    text = Config.display()
    assert "Danger Weight" in text
    assert "Cover Weight" in text
