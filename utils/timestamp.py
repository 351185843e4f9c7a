"""UTC timestamps for log records, errors and snapshots."""

from datetime import datetime, timezone


def format_timestamp(moment=None):
    """ISO 8601 UTC with microseconds and a Z suffix, e.g. 2020-01-01T00:00:00.500000Z."""
    moment = (moment or datetime.now(timezone.utc)).astimezone(timezone.utc)
    return moment.replace(tzinfo=None).isoformat(timespec="microseconds") + "Z"
