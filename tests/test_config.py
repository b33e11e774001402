"""Tests for polish_notation.config."""

from polish_notation.config import VALIDATOR_CONFIG, validate_config
from polish_notation.token_system import TOKEN_DEFINITIONS


def test_validate_config():
    validate_config()


def test_operator_symbols_match_token_definitions():
    assert sorted(VALIDATOR_CONFIG["operator_symbols"]) == sorted(TOKEN_DEFINITIONS)
