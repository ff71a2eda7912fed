from __future__ import annotations

import logging
from functools import partial
from typing import TYPE_CHECKING, NotRequired, TypedDict

from belgie_tokens import policy
from belgie_tokens.exceptions import (
    ConstraintError,
    InvalidClientError,
    InvalidRequestError,
    ValidationFailure,
)
from belgie_tokens.settings import TokenSettings
from belgie_tokens.utils.crypto import generate_token
from belgie_tokens.utils.scopes import parse_scopes, scopes_equal, scopes_to_string

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from belgie_tokens.protocols import (
        AccessTokenProtocol,
        ClientProtocol,
        ClientResolverProtocol,
        ResourceOwnerProtocol,
        TokenStoreProtocol,
    )
    from belgie_tokens.request import TokenRequest

logger = logging.getLogger(__name__)

_TOKEN_ATTRIBUTES = frozenset({"expires_in", "scopes", "application", "use_refresh_token"})


class TokenAttributes(TypedDict, total=False):
    expires_in: NotRequired[int | None]
    scopes: NotRequired[str | Sequence[str] | None]
    application: NotRequired[ClientProtocol | None]
    use_refresh_token: NotRequired[bool]


def _owner_id(resource_owner: ResourceOwnerProtocol) -> object:
    owner_id = getattr(resource_owner, "id", None)
    if owner_id is None:
        msg = "resource owner must have an id"
        raise ValueError(msg)
    return owner_id


def _check_attributes(attrs: TokenAttributes) -> None:
    unknown = set(attrs) - _TOKEN_ATTRIBUTES
    if unknown:
        msg = f"unsupported token attributes: {', '.join(sorted(unknown))}"
        raise ValueError(msg)


def _application_id(application: ClientProtocol | None) -> object:
    return None if application is None else application.id


class AccessTokenAuthority:
    """Issues, matches and looks up access tokens for resource owners.

    The authority holds no mutable state of its own. ``find_or_create_token``
    looks up a match and mints on a miss without any lock, so two concurrent
    calls with identical attributes may both mint. Each token string is still
    unique at the store; only the logical grant is duplicated.
    """

    def __init__(
        self,
        *,
        store: TokenStoreProtocol,
        clients: ClientResolverProtocol,
        settings: TokenSettings | None = None,
        token_factory: Callable[[], str] | None = None,
    ) -> None:
        self.store = store
        self.clients = clients
        self.settings = settings if settings is not None else TokenSettings()
        self.token_factory = token_factory or partial(generate_token, self.settings.token_bytes)

    async def load_client(self, request: TokenRequest) -> TokenRequest:
        if request.failed:
            return request

        client_id = request.client_id
        if client_id is None:
            return request.with_error(InvalidRequestError())

        client = await self.clients.resolve_client(client_id)
        if client is None:
            logger.warning("Unknown client_id in token request: %s", client_id)
            return request.with_error(InvalidClientError())

        return request.with_client(client)

    async def get_token(self, token: str) -> AccessTokenProtocol | None:
        return await self.store.find_by_token(token)

    async def create_token(
        self,
        resource_owner: ResourceOwnerProtocol,
        attrs: TokenAttributes | None = None,
    ) -> AccessTokenProtocol:
        attrs = attrs or {}
        _check_attributes(attrs)
        owner_id = _owner_id(resource_owner)

        scopes = parse_scopes(attrs.get("scopes"))
        data: dict[str, object] = {
            "resource_owner_id": owner_id,
            "application_id": _application_id(attrs.get("application")),
            "token": self.token_factory(),
            "refresh_token": self.token_factory() if attrs.get("use_refresh_token") else None,
            "scopes": scopes_to_string(scopes) if scopes else self.settings.default_scopes_string,
            "expires_in": attrs.get("expires_in"),
        }

        try:
            access_token = await self.store.insert(data)
        except ConstraintError as exc:
            logger.warning("Rejected access token for resource owner %s: %s", owner_id, exc)
            raise ValidationFailure(exc) from exc

        logger.debug("Issued access token %s for resource owner %s", access_token.id, owner_id)
        return access_token

    async def find_or_create_token(
        self,
        resource_owner: ResourceOwnerProtocol,
        attrs: TokenAttributes | None = None,
    ) -> AccessTokenProtocol:
        attrs = attrs or {}
        _check_attributes(attrs)

        filters: dict[str, object] = {
            "resource_owner_id": _owner_id(resource_owner),
            "application_id": _application_id(attrs.get("application")),
            "revoked_at": None,
        }
        if "scopes" in attrs:
            # Blank scopes are minted with the defaults, so they must match them too
            filters["scopes"] = scopes_to_string(attrs["scopes"]) or self.settings.default_scopes_string
        if "expires_in" in attrs:
            filters["expires_in"] = attrs["expires_in"]

        # An older expired match must not shadow a newer live one
        access_token = await self.store.find_one_by_attributes(filters, most_recent_first=True)
        if self.is_accessible(access_token):
            logger.debug("Reusing access token %s", access_token.id)
            return access_token

        return await self.create_token(resource_owner, attrs)

    async def get_matching_token_for(
        self,
        resource_owner: ResourceOwnerProtocol,
        application: ClientProtocol | None,
        scopes: str | Sequence[str] | None,
    ) -> AccessTokenProtocol | None:
        access_token = await self.store.find_one_by_attributes(
            {
                "resource_owner_id": _owner_id(resource_owner),
                "application_id": _application_id(application),
                "revoked_at": None,
            },
            most_recent_first=True,
        )
        if access_token is None:
            return None
        # Only the most recent token is considered, older ones are never searched
        if not scopes_equal(access_token.scopes, scopes):
            return None
        return access_token

    async def get_active_tokens_for(self, resource_owner: ResourceOwnerProtocol) -> list[AccessTokenProtocol]:
        return await self.store.find_all_by_owner_non_revoked(_owner_id(resource_owner))

    async def revoke_token(self, access_token: AccessTokenProtocol) -> AccessTokenProtocol:
        if policy.is_revoked(access_token):
            return access_token
        revoked = await self.store.revoke(access_token)
        logger.debug("Revoked access token %s", revoked.id)
        return revoked

    @staticmethod
    def is_accessible(access_token: AccessTokenProtocol | None) -> bool:
        return policy.is_accessible(access_token)
