"""Per-account routing of offer snapshots to item histories."""

from .models import AccountData, FlippingItemRecord
from .tracker import AccountTracker, FlippingItem

__all__ = [
    "AccountData",
    "AccountTracker",
    "FlippingItem",
    "FlippingItemRecord",
]
