from datetime import datetime, timezone
from typing import Optional


def today_utc_id(now: Optional[datetime] = None) -> str:
    """Today's puzzle key: the UTC calendar date as ``YYYY-MM-DD``.

    Naive datetimes are taken to be UTC already.
    """
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return now.date().isoformat()
