"""Tests for AnalysisConfig"""

import pytest

from xorcrack.config import AnalysisConfig
from xorcrack.error_handling import ConfigurationError


def test_defaults():
    config = AnalysisConfig()
    assert config.max_key_length == 40
    assert config.debug is False
    assert config.preview_length == 60


def test_from_env():
    config = AnalysisConfig.from_env({
        "XORCRACK_MAX_KEY_LENGTH": "12",
        "XORCRACK_DEBUG": "1",
        "XORCRACK_PREVIEW_LENGTH": "20",
    })
    assert config == AnalysisConfig(max_key_length=12, debug=True, preview_length=20)


def test_from_empty_env():
    assert AnalysisConfig.from_env({}) == AnalysisConfig()


@pytest.mark.parametrize("value", ["0", "false", "False", "no", ""])
def test_debug_falsy_values(value):
    assert AnalysisConfig.from_env({"XORCRACK_DEBUG": value}).debug is False


def test_non_integer_env():
    with pytest.raises(ConfigurationError) as excinfo:
        AnalysisConfig.from_env({"XORCRACK_MAX_KEY_LENGTH": "many"})
    assert "XORCRACK_MAX_KEY_LENGTH" in excinfo.value.message


@pytest.mark.parametrize("kwargs", [{"max_key_length": 0}, {"preview_length": -1}])
def test_invalid_values(kwargs):
    with pytest.raises(ConfigurationError):
        AnalysisConfig(**kwargs)


def test_with_overrides_skips_none():
    config = AnalysisConfig(max_key_length=10).with_overrides(max_key_length=None, debug=True)
    assert config.max_key_length == 10
    assert config.debug is True
