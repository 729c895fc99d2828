"""
Unit-тесты для InputAcquirer.

ЦКП: Проверка выбора источника и режима разбиения.
"""

from unittest.mock import MagicMock

import pytest

from contracts.acquired_text_dto import SourceKind, SplitMode
from rechain.acquisition.input_acquirer import InputAcquirer, resolve_split_mode
from rechain.acquisition.domain.exceptions import AcquisitionFileNotFoundError


@pytest.fixture
def http_source():
    source = MagicMock()
    source.read.return_value = "line one\nline two"
    return source


@pytest.fixture
def text_file(tmp_path):
    path = tmp_path / "fruits.txt"
    path.write_text("apple\nbanana\ncherry", encoding="utf-8")
    return path


class TestResolveSplitMode:

    def test_file_defaults(self):
        assert resolve_split_mode(SourceKind.FILE, False) is SplitMode.WHOLE_DOCUMENT
        assert resolve_split_mode(SourceKind.FILE, True) is SplitMode.LINE_BY_LINE

    def test_url_defaults(self):
        assert resolve_split_mode(SourceKind.URL, False) is SplitMode.LINE_BY_LINE
        assert resolve_split_mode(SourceKind.URL, True) is SplitMode.WHOLE_DOCUMENT


class TestAcquire:

    def test_file_whole_document_by_default(self, text_file, http_source):
        acquirer = InputAcquirer(http_source=http_source)

        result = acquirer.acquire(str(text_file))

        assert result.text == "apple\nbanana\ncherry"
        assert result.source_kind is SourceKind.FILE
        assert result.split_mode is SplitMode.WHOLE_DOCUMENT
        assert result.identifier == str(text_file)
        assert result.is_split is False
        http_source.read.assert_not_called()

    def test_file_multiline_flag_splits(self, text_file, http_source):
        result = InputAcquirer(http_source=http_source).acquire(str(text_file), multiline=True)
        assert result.split_mode is SplitMode.LINE_BY_LINE
        assert result.is_split is True

    def test_url_line_by_line_by_default(self, http_source):
        file_source = MagicMock()
        acquirer = InputAcquirer(file_source=file_source, http_source=http_source)

        result = acquirer.acquire("https://example.com/file.txt")

        assert result.text == "line one\nline two"
        assert result.source_kind is SourceKind.URL
        assert result.split_mode is SplitMode.LINE_BY_LINE
        http_source.read.assert_called_once_with("https://example.com/file.txt")
        file_source.read.assert_not_called()

    def test_url_multiline_flag_whole_document(self, http_source):
        result = InputAcquirer(http_source=http_source).acquire(
            "https://example.com/file.txt", multiline=True
        )
        assert result.split_mode is SplitMode.WHOLE_DOCUMENT

    def test_missing_file_propagates(self, tmp_path, http_source):
        with pytest.raises(AcquisitionFileNotFoundError):
            InputAcquirer(http_source=http_source).acquire(str(tmp_path / "nope.txt"))

    def test_acquired_text_is_frozen(self, text_file, http_source):
        result = InputAcquirer(http_source=http_source).acquire(str(text_file))
        with pytest.raises(Exception):
            result.text = "changed"
