import pytest

from identicon.config import get_settings

# 16 bytes, parity: E O O E O O E O O E O O E E O E
FIXED_DIGEST = bytes([2, 3, 5, 8, 13, 21, 34, 55, 89, 144, 233, 121, 98, 64, 7, 10])


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    for var in ("IDENTICON_DEFAULT_PIXELS", "IDENTICON_DEFAULT_SIZE", "IDENTICON_OUTPUT_DIR", "IDENTICON_JPEG_QUALITY",
                "IDENTICON_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fixed_digest():
    return FIXED_DIGEST
