import pytest

from memkv.config import DEFAULT_BIND, Settings, parse_bind
from memkv.errors import InvalidBindAddress


def test_default_settings():
    settings = Settings()
    assert settings.bind == DEFAULT_BIND == "127.0.0.1:3000"
    assert settings.expose_delete is True


@pytest.mark.parametrize("bind, expected", [
    ("127.0.0.1:3000", ("127.0.0.1", 3000)),
    ("0.0.0.0:80", ("0.0.0.0", 80)),
    ("[::1]:8080", ("::1", 8080)),
    ("127.0.0.1:0", ("127.0.0.1", 0)),
])
def test_parse_bind(bind, expected):
    assert parse_bind(bind) == expected


@pytest.mark.parametrize("bind", [
    "",
    "3000",
    ":3000",
    "127.0.0.1",
    "127.0.0.1:",
    "127.0.0.1:http",
    "127.0.0.1:65536",
    "127.0.0.1:-1",
    "localhost:3000",
    "::1:3000",
    "[::1]3000",
    "127.0.0.1:\u00b3",
    "127.0.0.1:\u0663\u0660",
    "[127.0.0.1]:80",
])
def test_parse_bind_rejects(bind):
    with pytest.raises(InvalidBindAddress):
        parse_bind(bind)


def test_invalid_bind_is_value_error():
    with pytest.raises(ValueError, match="not an IP address"):
        parse_bind("example.com:3000")
