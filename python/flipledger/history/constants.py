"""Default constants used across the history package."""

from flipledger.utils.ts import hours_to_ms

# Exchange buy limits refresh on a rolling window starting at the first buy
GE_LIMIT_WINDOW_HOURS = 4
GE_LIMIT_WINDOW_MS = hours_to_ms(GE_LIMIT_WINDOW_HOURS)
