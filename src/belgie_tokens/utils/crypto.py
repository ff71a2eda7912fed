import secrets

MIN_TOKEN_BYTES = 32


def generate_token(nbytes: int = MIN_TOKEN_BYTES) -> str:
    if nbytes < MIN_TOKEN_BYTES:
        msg = f"tokens require at least {MIN_TOKEN_BYTES} random bytes"
        raise ValueError(msg)
    return secrets.token_hex(nbytes)
