import pytest

ENV_VARS = (
    "TEXTCONV_BINARY_BITS",
    "TEXTCONV_HEX_CASE",
    "TEXTCONV_EMOJI_PRESET",
    "TEXTCONV_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # setenv first so teardown also removes values a .env file injected
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    yield
