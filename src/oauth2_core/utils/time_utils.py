from datetime import datetime, timezone


def get_ts_utcnow() -> datetime:
    return datetime.now(timezone.utc)
