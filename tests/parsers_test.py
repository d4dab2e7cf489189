import pytest

from reggie_utils import parsers


@pytest.mark.parametrize(
    "value,expected",
    [
        (True, True),
        (False, False),
        (1, True),
        (0, False),
        (" yes ", True),
        ("OFF", False),
        ("t", True),
    ],
)
def test_to_bool(value, expected):
    assert parsers.to_bool(value) is expected


@pytest.mark.parametrize("value", [None, "", "   ", "maybe", -1, object()])
def test_to_bool_default(value):
    assert parsers.to_bool(value) is False
    assert parsers.to_bool(value, True) is True


def test_env_bool(monkeypatch):
    monkeypatch.setenv("REGGIE_UTILS_FLAG", "on")
    assert parsers.env_bool("REGGIE_UTILS_FLAG") is True
    monkeypatch.setenv("REGGIE_UTILS_FLAG", "garbage")
    assert parsers.env_bool("REGGIE_UTILS_FLAG", True) is True
    monkeypatch.delenv("REGGIE_UTILS_FLAG")
    assert parsers.env_bool("REGGIE_UTILS_FLAG") is False
