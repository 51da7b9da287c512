from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def iso_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision, as sent on the wire."""
    return utc_now().isoformat(timespec="milliseconds").replace("+00:00", "Z")
