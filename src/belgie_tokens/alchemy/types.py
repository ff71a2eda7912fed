from datetime import datetime
from typing import Any

from sqlalchemy import DateTime
from sqlalchemy.types import TypeDecorator

from belgie_tokens.policy import as_utc


class DateTimeUTC(TypeDecorator[datetime]):
    """Timezone-aware datetimes, stored and loaded as UTC.

    Naive values are assumed to be UTC already; SQLite returns every value naive.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, _dialect: Any) -> datetime | None:  # type: ignore[override]  # noqa: ANN401
        if value is None:
            return None
        if not isinstance(value, datetime):
            msg = f"DateTimeUTC expects datetime or None, got {type(value)}"
            raise TypeError(msg)
        return as_utc(value)

    def process_result_value(self, value: datetime | None, _dialect: Any) -> datetime | None:  # type: ignore[override]  # noqa: ANN401
        return None if value is None else as_utc(value)
