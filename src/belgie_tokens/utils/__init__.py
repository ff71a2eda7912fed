from belgie_tokens.utils.crypto import generate_token
from belgie_tokens.utils.scopes import parse_scopes, scopes_equal, scopes_to_string

__all__ = [
    "generate_token",
    "parse_scopes",
    "scopes_equal",
    "scopes_to_string",
]
