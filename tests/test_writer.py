"""Tests for writing a word list to disk"""

import pytest

from dict_fixer.errors import WriteError
from dict_fixer.loader import read_word_list
from dict_fixer.writer import write_word_list


class TestWriteWordList:
    def test_no_trailing_newline(self, output_file):
        write_word_list(str(output_file), ["Test", "Tester", "Tested", "Testing"])

        assert output_file.read_bytes() == b"Test\nTester\nTested\nTesting"

    def test_empty_list_writes_empty_file(self, output_file):
        write_word_list(str(output_file), [])

        assert output_file.exists()
        assert output_file.read_bytes() == b""

    def test_overwrites_existing_content(self, output_file):
        output_file.write_text("old content that is much longer than the new one\n", encoding="utf-8")

        write_word_list(str(output_file), ["new"])

        assert output_file.read_text(encoding="utf-8") == "new"

    def test_round_trip(self, output_file):
        words = ["alpha", "", "beta", "beta", "gamma\r", "été"]

        write_word_list(str(output_file), words)

        assert read_word_list(str(output_file)) == words

    def test_missing_parent_directory_raises_write_error(self, tmp_path):
        target = tmp_path / "no-such-dir" / "out.txt"

        with pytest.raises(WriteError) as exc_info:
            write_word_list(str(target), ["word"])

        assert exc_info.value.path == str(target)
        assert str(target) in str(exc_info.value)

    def test_directory_target_raises_write_error(self, tmp_path):
        with pytest.raises(WriteError):
            write_word_list(str(tmp_path), ["word"])

    def test_unencodable_text_raises_write_error(self, output_file):
        with pytest.raises(WriteError):
            write_word_list(str(output_file), ["café"], encoding="ascii")
