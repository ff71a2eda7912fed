from belgie_tokens.storage.memory import InMemoryOAuthStore, MemoryAccessToken, MemoryApplication

__all__ = [
    "InMemoryOAuthStore",
    "MemoryAccessToken",
    "MemoryApplication",
]
