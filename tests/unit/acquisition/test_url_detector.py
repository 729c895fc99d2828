import pytest

from rechain.acquisition.infrastructure.url_detector import is_url


@pytest.mark.parametrize("identifier", [
    "https://example.com/file.txt",
    "http://localhost:8080/",
    "http://127.0.0.1/data?x=1",
    "ftp://mirror.example.org/pub/README",
])
def test_absolute_urls(identifier):
    assert is_url(identifier) is True


@pytest.mark.parametrize("identifier", [
    "data/input.txt",
    "/tmp/input.txt",
    "input.txt",
    "./https/example.txt",
    "C:\\Users\\me\\input.txt",
    "mailto:someone",
    "http://[::1",
    "",
])
def test_everything_else_is_a_file(identifier):
    assert is_url(identifier) is False
