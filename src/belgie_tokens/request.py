from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from belgie_tokens.exceptions import OAuthError
    from belgie_tokens.protocols import ClientProtocol

CLIENT_ID_PARAM = "client_id"


@dataclass(frozen=True, slots=True, kw_only=True)
class TokenRequest:
    """Inbound token request threaded through a chain of validation steps.

    Each step returns a new request. Once ``error`` is set the request is
    failed and later steps hand it back unchanged, so only the first error
    is reported.
    """

    params: Mapping[str, object] = field(default_factory=dict)
    client: ClientProtocol | None = None
    error: OAuthError | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None

    @property
    def client_id(self) -> str | None:
        value = self.params.get(CLIENT_ID_PARAM)
        if not isinstance(value, str) or not value.strip():
            return None
        return value

    def with_error(self, error: OAuthError) -> TokenRequest:
        if self.failed:
            return self
        return replace(self, error=error)

    def with_client(self, client: ClientProtocol) -> TokenRequest:
        return replace(self, client=client)
