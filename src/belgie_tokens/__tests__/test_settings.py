import pytest
from pydantic import ValidationError

from belgie_tokens.settings import TokenSettings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("BELGIE_TOKENS_DEFAULT_SCOPES", raising=False)
    monkeypatch.delenv("BELGIE_TOKENS_TOKEN_BYTES", raising=False)
    settings = TokenSettings(_env_file=None)
    assert settings.default_scopes == ["user"]
    assert settings.token_bytes == 32
    assert settings.default_scopes_string == "user"


def test_default_scopes_from_list() -> None:
    settings = TokenSettings(default_scopes=["read", "write"])
    assert settings.default_scopes_string == "read write"


def test_default_scopes_from_string() -> None:
    settings = TokenSettings(default_scopes="read  write")
    assert settings.default_scopes == ["read", "write"]


def test_default_scopes_from_env_space_delimited(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BELGIE_TOKENS_DEFAULT_SCOPES", "public profile")
    settings = TokenSettings(_env_file=None)
    assert settings.default_scopes == ["public", "profile"]


def test_default_scopes_from_env_json(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BELGIE_TOKENS_DEFAULT_SCOPES", '["public", "profile"]')
    settings = TokenSettings(_env_file=None)
    assert settings.default_scopes == ["public", "profile"]


def test_default_scopes_must_not_be_empty() -> None:
    with pytest.raises(ValidationError, match="at least one scope"):
        TokenSettings(default_scopes=[])


def test_default_scopes_must_be_valid() -> None:
    with pytest.raises(ValidationError, match="invalid scope name"):
        TokenSettings(default_scopes=['bad"scope'])


def test_token_bytes_minimum() -> None:
    with pytest.raises(ValidationError):
        TokenSettings(token_bytes=16)
