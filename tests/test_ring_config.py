import pytest

from ring_config import read_int_setting


def test_missing_setting_uses_default(monkeypatch):
    monkeypatch.delenv("HASH_RING_TEST_SETTING", raising=False)
    assert read_int_setting("HASH_RING_TEST_SETTING", 7) == 7


def test_blank_setting_uses_default(monkeypatch):
    monkeypatch.setenv("HASH_RING_TEST_SETTING", "  ")
    assert read_int_setting("HASH_RING_TEST_SETTING", 7) == 7


def test_setting_is_parsed(monkeypatch):
    monkeypatch.setenv("HASH_RING_TEST_SETTING", "64")
    assert read_int_setting("HASH_RING_TEST_SETTING", 7) == 64


def test_malformed_setting_names_the_variable(monkeypatch):
    monkeypatch.setenv("HASH_RING_TEST_SETTING", "lots")
    with pytest.raises(ValueError, match="HASH_RING_TEST_SETTING"):
        read_int_setting("HASH_RING_TEST_SETTING", 7)
