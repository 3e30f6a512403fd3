"""Shared fixtures for dictionary fixer tests"""

import pytest

SAMPLE_DICTIONARY = "Test\nTest's\nTester\nTested\nTesting"


@pytest.fixture
def sample_file(tmp_path):
    """Word list with one invalid word among five"""
    path = tmp_path / "unit-test-file.txt"
    path.write_text(SAMPLE_DICTIONARY, encoding="utf-8")
    return path


@pytest.fixture
def output_file(tmp_path):
    return tmp_path / "unit-test-output-file.txt"


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep a config.yml in the working directory from leaking into tests"""
    monkeypatch.delenv("DICT_FIXER_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
