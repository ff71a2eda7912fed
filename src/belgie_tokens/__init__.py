"""Access token issuing, matching and revocation for OAuth2 authorization servers."""

from belgie_tokens.authority import AccessTokenAuthority, TokenAttributes
from belgie_tokens.exceptions import (
    ApplicationConstraintError,
    BelgieTokensError,
    ConstraintError,
    InvalidClientError,
    InvalidRequestError,
    InvalidScopeError,
    OAuthError,
    ResourceOwnerConstraintError,
    TokenConstraintError,
    ValidationFailure,
)
from belgie_tokens.policy import expires_at, is_accessible, is_expired, is_revoked
from belgie_tokens.protocols import (
    AccessTokenProtocol,
    ClientProtocol,
    ClientResolverProtocol,
    ResourceOwnerProtocol,
    TokenStoreProtocol,
)
from belgie_tokens.request import TokenRequest
from belgie_tokens.settings import TokenSettings
from belgie_tokens.storage import InMemoryOAuthStore
from belgie_tokens.utils import generate_token, parse_scopes, scopes_equal, scopes_to_string

__version__ = "0.1.0"

__all__ = [
    "AccessTokenAuthority",
    "AccessTokenProtocol",
    "ApplicationConstraintError",
    "BelgieTokensError",
    "ClientProtocol",
    "ClientResolverProtocol",
    "ConstraintError",
    "InMemoryOAuthStore",
    "InvalidClientError",
    "InvalidRequestError",
    "InvalidScopeError",
    "OAuthError",
    "ResourceOwnerConstraintError",
    "ResourceOwnerProtocol",
    "TokenAttributes",
    "TokenConstraintError",
    "TokenRequest",
    "TokenSettings",
    "TokenStoreProtocol",
    "ValidationFailure",
    "__version__",
    "expires_at",
    "generate_token",
    "is_accessible",
    "is_expired",
    "is_revoked",
    "parse_scopes",
    "scopes_equal",
    "scopes_to_string",
]
