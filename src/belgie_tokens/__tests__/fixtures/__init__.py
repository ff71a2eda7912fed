from belgie_tokens.__tests__.fixtures.database import get_test_engine, get_test_session_factory
from belgie_tokens.__tests__.fixtures.models import User

__all__ = [
    "User",
    "get_test_engine",
    "get_test_session_factory",
]
