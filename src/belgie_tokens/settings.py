from __future__ import annotations

import json
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from belgie_tokens.exceptions import InvalidScopeError
from belgie_tokens.utils.crypto import MIN_TOKEN_BYTES
from belgie_tokens.utils.scopes import parse_scopes, scopes_to_string


class TokenSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="BELGIE_TOKENS_",
        env_file=".env",
        extra="ignore",
    )

    default_scopes: Annotated[list[str], NoDecode] = Field(default=["user"])
    token_bytes: int = Field(default=MIN_TOKEN_BYTES, ge=MIN_TOKEN_BYTES)

    @field_validator("default_scopes", mode="before")
    @classmethod
    def split_default_scopes(cls, value: object) -> object:
        """Accept a JSON list or a space-delimited string from the environment."""
        if not isinstance(value, str):
            return value
        stripped = value.strip()
        if stripped.startswith("["):
            try:
                return json.loads(stripped)
            except json.JSONDecodeError as exc:
                msg = "default_scopes is not a valid JSON list"
                raise ValueError(msg) from exc
        return stripped.split()

    @field_validator("default_scopes")
    @classmethod
    def validate_default_scopes(cls, value: list[str]) -> list[str]:
        # Stored scopes are never empty, so the fallback must not be either
        try:
            return parse_scopes(value, allow_empty=False)
        except InvalidScopeError as exc:
            raise ValueError(exc.description) from exc

    @property
    def default_scopes_string(self) -> str:
        return scopes_to_string(self.default_scopes)
