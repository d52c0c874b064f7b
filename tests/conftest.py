"""Shared test fixtures."""

import pytest

# Key and token from the token firmware test suite
TEST_KEY = bytes.fromhex("ecde18dbe76fbd0c33330f1c354871db")
TEST_TOKEN_BYTES = bytes.fromhex("8792ebfe26cc130030c20011c89f23c8")


@pytest.fixture
def key() -> bytes:
    """16-byte secret key for the firmware test vectors."""
    return TEST_KEY


@pytest.fixture
def token_bytes() -> bytes:
    """Valid 16-byte plaintext token."""
    return TEST_TOKEN_BYTES


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep YUBIOTP_ environment variables out of tests."""
    for name in ("YUBIOTP_KEY", "YUBIOTP_LOG_LEVEL", "YUBIOTP_PUBLIC_ID_LENGTH"):
        monkeypatch.delenv(name, raising=False)
