import pytest

from rechain.acquisition.infrastructure.file_text_source import FileTextSource
from rechain.acquisition.domain.exceptions import (
    AcquisitionError,
    AcquisitionDecodingError,
    AcquisitionFileNotFoundError,
    AcquisitionReadError,
)


@pytest.fixture
def source():
    """Fixture для FileTextSource."""
    return FileTextSource()


def test_read_utf8_file(source, tmp_path):
    """Тест: файл читается целиком, без изменений."""
    path = tmp_path / "input.txt"
    path.write_bytes("apple\nbanana\r\nвишня\n".encode("utf-8"))

    assert source.read(str(path)) == "apple\nbanana\r\nвишня\n"


def test_read_empty_file(source, tmp_path):
    path = tmp_path / "empty.txt"
    path.write_bytes(b"")
    assert source.read(str(path)) == ""


def test_missing_file(source, tmp_path):
    """Тест: отсутствующий файл -> AcquisitionFileNotFoundError."""
    with pytest.raises(AcquisitionFileNotFoundError) as exc_info:
        source.read(str(tmp_path / "missing.txt"))

    assert isinstance(exc_info.value, AcquisitionError)
    assert "missing.txt" in str(exc_info.value)


def test_directory_is_read_error(source, tmp_path):
    with pytest.raises(AcquisitionReadError) as exc_info:
        source.read(str(tmp_path))
    assert isinstance(exc_info.value.original_error, OSError)


def test_invalid_utf8(source, tmp_path):
    """Тест: невалидный UTF-8 -> AcquisitionDecodingError."""
    path = tmp_path / "latin1.txt"
    path.write_bytes(b"caf\xe9\n")

    with pytest.raises(AcquisitionDecodingError) as exc_info:
        source.read(str(path))
    assert isinstance(exc_info.value.original_error, UnicodeDecodeError)


def test_stat_failure_is_acquisition_error(source):
    """Имя длиннее NAME_MAX: ошибка stat не выходит наружу как голый OSError."""
    with pytest.raises(AcquisitionError) as exc_info:
        source.read("x" * 5000)
    assert isinstance(exc_info.value, (AcquisitionReadError, AcquisitionFileNotFoundError))
