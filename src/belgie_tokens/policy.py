"""Time and revocation rules deciding whether an access token grants access."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from belgie_tokens.protocols import AccessTokenProtocol


class ExpirableProtocol(Protocol):
    expires_in: int | None
    created_at: datetime


class RevocableProtocol(Protocol):
    revoked_at: datetime | None


def as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def expires_at(token: ExpirableProtocol) -> datetime | None:
    if token.expires_in is None:
        return None
    return as_utc(token.created_at) + timedelta(seconds=token.expires_in)


def is_expired(token: ExpirableProtocol, *, now: datetime | None = None) -> bool:
    deadline = expires_at(token)
    if deadline is None:
        return False
    current = datetime.now(UTC) if now is None else as_utc(now)
    return current >= deadline


def is_revoked(token: RevocableProtocol) -> bool:
    # Presence alone revokes, even if the timestamp lies in the future
    return token.revoked_at is not None


def is_accessible(token: AccessTokenProtocol | None, *, now: datetime | None = None) -> bool:
    if token is None:
        return False
    return not is_expired(token, now=now) and not is_revoked(token)
