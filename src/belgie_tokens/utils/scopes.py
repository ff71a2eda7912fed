import re
from collections.abc import Sequence
from typing import TypeAlias

from belgie_tokens.exceptions import InvalidScopeError

# scope-token = 1*( %x21 / %x23-5B / %x5D-7E )
_SCOPE_TOKEN = re.compile(r"[\x21\x23-\x5B\x5D-\x7E]+")

ScopesInput: TypeAlias = str | Sequence[str] | None


def parse_scopes(scopes: ScopesInput, *, allow_empty: bool = True) -> list[str]:
    if scopes is None:
        names: list[str] = []
    elif isinstance(scopes, str):
        names = scopes.split()
    else:
        names = [name for scope in scopes for name in str(scope).split()]

    for name in names:
        if not _SCOPE_TOKEN.fullmatch(name):
            msg = f"invalid scope name: {name!r}"
            raise InvalidScopeError(msg)

    if not names and not allow_empty:
        msg = "at least one scope is required"
        raise InvalidScopeError(msg)

    return names


def scopes_to_string(scopes: ScopesInput) -> str:
    return " ".join(parse_scopes(scopes))


def scopes_equal(first: ScopesInput, second: ScopesInput) -> bool:
    # Order and duplicates are irrelevant: "read write" grants the same as "write read"
    return set(parse_scopes(first)) == set(parse_scopes(second))
