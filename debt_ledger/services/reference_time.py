"""
Dates as seen from the reference calendar.

Users record payments against their local calendar day, so
"today" is resolved in a fixed timezone rather than UTC.
"""

from datetime import date, datetime, time, timezone
from zoneinfo import ZoneInfo

from debt_ledger.config import get_settings


def reference_zone() -> ZoneInfo:
    return ZoneInfo(get_settings().REFERENCE_TIMEZONE)


def today() -> date:
    """Current calendar date in the reference timezone."""
    return datetime.now(reference_zone()).date()


def start_of_day_utc(day: date) -> datetime:
    """
    Midnight of day in the reference timezone, as naive UTC.

    2024-03-05 in Asia/Jakarta becomes 2024-03-04 17:00.
    """
    local = datetime.combine(day, time.min, tzinfo=reference_zone())
    return local.astimezone(timezone.utc).replace(tzinfo=None)
