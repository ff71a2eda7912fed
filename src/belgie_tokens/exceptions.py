from __future__ import annotations

from typing import ClassVar


class BelgieTokensError(Exception):
    pass


class OAuthError(BelgieTokensError):
    error: ClassVar[str] = "server_error"
    status_code: ClassVar[int] = 500
    default_description: ClassVar[str] = "The authorization server encountered an unexpected condition."

    def __init__(self, description: str | None = None) -> None:
        self.description = description or self.default_description
        super().__init__(self.description)

    def to_dict(self) -> dict[str, str]:
        return {"error": self.error, "error_description": self.description}


class InvalidRequestError(OAuthError):
    error = "invalid_request"
    status_code = 400
    default_description = (
        "The request is missing a required parameter, includes an unsupported parameter value, "
        "or is otherwise malformed."
    )


class InvalidClientError(OAuthError):
    error = "invalid_client"
    status_code = 401
    default_description = (
        "Client authentication failed due to unknown client, no client authentication included, "
        "or unsupported authentication method."
    )


class InvalidScopeError(OAuthError):
    error = "invalid_scope"
    status_code = 400
    default_description = "The requested scope is invalid, unknown, or malformed."


class ConstraintError(BelgieTokensError):
    field: str = ""

    def __init__(self, message: str | None = None, *, field: str | None = None) -> None:
        if field is not None:
            self.field = field
        super().__init__(message or f"{self.field} violates a storage constraint")


class ApplicationConstraintError(ConstraintError):
    field = "application"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or "application does not exist")


class ResourceOwnerConstraintError(ConstraintError):
    field = "resource_owner"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or "resource owner does not exist")


class TokenConstraintError(ConstraintError):
    field = "token"

    def __init__(self, field: str = "token") -> None:
        super().__init__(f"{field} has already been taken", field=field)


class ValidationFailure(BelgieTokensError):  # noqa: N818
    def __init__(self, *errors: ConstraintError) -> None:
        if not errors:
            msg = "ValidationFailure requires at least one error"
            raise ValueError(msg)
        self.errors = errors
        super().__init__("; ".join(str(error) for error in errors))

    @property
    def fields(self) -> list[str]:
        return [error.field for error in self.errors]
