"""Identity and clock helpers shared by the stores."""

import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional

_TICK = timedelta(microseconds=1)


def new_id() -> str:
    """Return a fresh opaque record identifier."""
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def next_timestamp(previous: Optional[datetime] = None) -> datetime:
    """Return the current time, strictly later than ``previous``.

    Two mutations of the same record can land within one clock tick;
    ``updated_at`` must still move forward, so a clock that has not
    advanced is bumped by one microsecond.
    """
    now = utcnow()
    if previous is not None and now <= previous:
        return previous + _TICK
    return now
