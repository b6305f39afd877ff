from datetime import datetime, timezone

MS_PER_MINUTE = 60 * 1000
MS_PER_HOUR = 60 * MS_PER_MINUTE


def get_current_timestamp_ms() -> int:
    """Get current timestamp in milliseconds."""
    return int(datetime.now(timezone.utc).timestamp() * 1000)


def minutes_to_ms(minutes: float) -> int:
    return int(minutes * MS_PER_MINUTE)


def hours_to_ms(hours: float) -> int:
    return int(hours * MS_PER_HOUR)
