import pytest

from pastebin_client.validators import key_ok


@pytest.mark.parametrize(
    "value",
    [
        "a1b2c3d4e5f6a1b2c3d4e5f6a1b2c3d4",
        "A1B2C3D4E5F6A1B2C3D4E5F6A1B2C3D4",
        "0123456789abcdefABCDEF0123456789",
        "10b20d3ff00b856a455ba5004ea9d2a1",
    ],
)
def test_key_ok_accepts_32_hex_chars(value) -> None:
    assert key_ok(value)


@pytest.mark.parametrize(
    "value",
    [
        "",
        "a1b2c3d4e5f6a1b2c3d4e5f6a1b2c3d",
        "a1b2c3d4e5f6a1b2c3d4e5f6a1b2c3d4e",
        "g1b2c3d4e5f6a1b2c3d4e5f6a1b2c3d4",
        "Bad API request, invalid login",
        " a1b2c3d4e5f6a1b2c3d4e5f6a1b2c3d4",
        "a1b2c3d4e5f6a1b2c3d4e5f6a1b2c3d4\n",
        "a1b2c3d4e5f6a1b2c3d4e5f6a1b2c3d4\nBad API request",
        None,
        12345678901234567890123456789012,
    ],
)
def test_key_ok_rejects_everything_else(value) -> None:
    assert not key_ok(value)
