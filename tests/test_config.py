import pytest

from gmaps_places.config import load_api_key, load_settings, strip_wrapping_quotes
from gmaps_places.errors import ApiKeyLoadingFailure, MissingApiKey


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ('"abc123"', "abc123"),
        ('""abc""', '"abc"'),
        ('"a"b"', 'a"b'),
        ("abc123", "abc123"),
        ('"abc123', '"abc123'),
        ('abc123"', 'abc123"'),
        ('"', '"'),
    ],
)
def test_strip_wrapping_quotes(raw: str, expected: str) -> None:
    assert strip_wrapping_quotes(raw) == expected


def test_load_api_key_unwraps_quoted_env_value(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GMAPS_API_KEY", '"abc123"')

    assert load_api_key() == "abc123"


def test_load_api_key_plain_env_value(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GMAPS_API_KEY", "abc123")

    assert load_api_key() == "abc123"


def test_load_api_key_missing() -> None:
    with pytest.raises(MissingApiKey, match="GMAPS_API_KEY"):
        load_api_key()


def test_load_api_key_empty_after_unwrapping(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GMAPS_API_KEY", '""')

    with pytest.raises(MissingApiKey):
        load_api_key()


def test_load_api_key_from_explicit_env_file(tmp_path) -> None:
    env_file = tmp_path / "keys.env"
    env_file.write_text("GMAPS_API_KEY='\"abc123\"'\n", encoding="utf-8")

    assert load_api_key(env_file) == "abc123"


def test_load_api_key_from_default_dotenv(tmp_path) -> None:
    (tmp_path / ".env").write_text("GMAPS_API_KEY=from-dotenv\nUNRELATED=1\n", encoding="utf-8")

    assert load_api_key() == "from-dotenv"


def test_environment_overrides_env_file(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    env_file = tmp_path / "keys.env"
    env_file.write_text("GMAPS_API_KEY=from-file\n", encoding="utf-8")
    monkeypatch.setenv("GMAPS_API_KEY", "from-env")

    assert load_api_key(env_file) == "from-env"


def test_missing_explicit_env_file(tmp_path) -> None:
    with pytest.raises(ApiKeyLoadingFailure):
        load_api_key(tmp_path / "nope.env")


def test_env_file_without_key(tmp_path) -> None:
    env_file = tmp_path / "keys.env"
    env_file.write_text("OTHER_SETTING=1\n", encoding="utf-8")

    with pytest.raises(MissingApiKey):
        load_api_key(env_file)


@pytest.mark.parametrize("timeout", ["fast", "0", "-1"])
def test_malformed_timeout(monkeypatch: pytest.MonkeyPatch, timeout: str) -> None:
    monkeypatch.setenv("GMAPS_API_KEY", "abc123")
    monkeypatch.setenv("GMAPS_REQUEST_TIMEOUT_SECONDS", timeout)

    with pytest.raises(ApiKeyLoadingFailure):
        load_settings()


def test_settings_defaults() -> None:
    settings = load_settings()

    assert settings.GMAPS_API_KEY == ""
    assert settings.GMAPS_BASE_URL == "https://maps.googleapis.com"
    assert settings.GMAPS_REQUEST_TIMEOUT_SECONDS == 10.0
