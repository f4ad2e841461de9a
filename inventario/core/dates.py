from datetime import datetime, timezone

from inventario.core.constants import TIMESTAMP_FORMAT


def current_timestamp(now=None):
    """Return the UTC time formatted like SQLite's CURRENT_TIMESTAMP."""
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return now.strftime(TIMESTAMP_FORMAT)


def normalize_timestamp(value, now=None):
    if value is None:
        return current_timestamp(now)
    if isinstance(value, datetime):
        return current_timestamp(value)
    value_text = str(value).strip()
    if not value_text:
        return current_timestamp(now)
    return value_text
