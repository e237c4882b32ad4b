from datetime import date, datetime, time, timezone


def normalize_datetime(value):
    """Coerce a date / datetime / ISO string into an aware UTC datetime.

    Plain dates map to midnight UTC. Unparseable input returns None.
    """
    if value is None:
        return None
    if isinstance(value, str):
        value_text = value.strip()
        if not value_text:
            return None
        if value_text.endswith("Z"):
            value_text = value_text[:-1] + "+00:00"
        try:
            value = datetime.fromisoformat(value_text)
        except ValueError:
            return None
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=timezone.utc)
    return None
