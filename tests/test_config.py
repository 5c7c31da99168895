"""
Tests for option parsing and validation.
"""

import pytest
from hexpeek.config import DEFAULT_WORD_SIZE, DumpConfig, parse_number
from hexpeek.errors import InvalidArgumentError, ParseError


@pytest.mark.parametrize("text,expected", [
    ("0", 0),
    ("16", 16),
    ("0x10", 16),
    ("0xFF", 255),
    ("0x00ab", 0xab),
])
def test_parse_number(text, expected):
    assert parse_number(text) == expected


@pytest.mark.parametrize("text,reason", [
    ("", "cannot parse integer from empty string"),
    ("0x", "cannot parse integer from empty string"),
    ("0xzz", "invalid digit found in string"),
    ("12a", "invalid digit found in string"),
    ("-5", "invalid digit found in string"),
    ("1_000", "invalid digit found in string"),
    (" 7", "invalid digit found in string"),
])
def test_parse_number_rejects(text, reason):
    """Test that the error names the literal and the reason."""
    with pytest.raises(ParseError) as excinfo:
        parse_number(text, 'offset')
    assert str(excinfo.value) == f"invalid offset value '{text}': {reason}"
    assert excinfo.value.exit_code == 3


def test_default_config():
    config = DumpConfig()
    assert config.word_size == DEFAULT_WORD_SIZE == 2
    assert config.skip_zero_lines
    assert config.start == 0
    assert config.validate() is config


def test_limit_must_pass_offset():
    """Test that a limit at or before the offset is rejected."""
    with pytest.raises(InvalidArgumentError):
        DumpConfig(offset=0x20, limit=0x20).validate()
    DumpConfig(offset=0x20, limit=0).validate()
    DumpConfig(offset=0x20, limit=0x21).validate()


def test_word_size_must_be_positive():
    with pytest.raises(InvalidArgumentError):
        DumpConfig(word_size=0).validate()


if __name__ == '__main__':
    pytest.main([__file__])
