"""SQLAlchemy storage for access tokens and client applications.

Usage:
    from belgie_tokens.alchemy import AlchemyClientResolver, AlchemyTokenStore

    async with session_maker() as session:
        authority = AccessTokenAuthority(
            store=AlchemyTokenStore(session),
            clients=AlchemyClientResolver(session),
        )

Access tokens reference ``users.id``; declare your user model on
``belgie_tokens.alchemy.Base`` so both tables share one metadata.
"""

_ALCHEMY_IMPORT_ERROR = (
    "belgie_tokens.alchemy requires the 'alchemy' extra. Install with: uv add belgie-tokens[alchemy]"
)

try:
    from belgie_tokens.alchemy.adapter import AlchemyClientResolver, AlchemyTokenStore
    from belgie_tokens.alchemy.base import Base, PrimaryKeyMixin
    from belgie_tokens.alchemy.models import OAuthAccessToken, OAuthApplication
    from belgie_tokens.alchemy.types import DateTimeUTC
except ModuleNotFoundError as exc:
    raise ImportError(_ALCHEMY_IMPORT_ERROR) from exc

__all__ = [
    "AlchemyClientResolver",
    "AlchemyTokenStore",
    "Base",
    "DateTimeUTC",
    "OAuthAccessToken",
    "OAuthApplication",
    "PrimaryKeyMixin",
]
