"""Recency helpers: room selection and per-room message filtering.

Both walks rely on newest-first ordering and stop at the first entry that
falls outside the window instead of filtering the whole collection.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Sequence

from recent_messages.models.message_models import Message
from recent_messages.models.room_models import Room
from recent_messages.utils.dates import hours_before, utc_now


# Rooms without activity inside this window are never fetched.
ROOM_LOOKBACK_HOURS = 1200


def is_recent(date: datetime, now: Optional[datetime] = None, hours: int = ROOM_LOOKBACK_HOURS) -> bool:
    """True when date is strictly after now minus hours."""
    limit = hours_before(now or utc_now(), hours)
    return date > limit


def sort_rooms_by_activity(rooms: Sequence[Room]) -> List[Room]:
    # sorted() is stable with reverse=True, so equal timestamps keep input order
    return sorted(rooms, key=lambda room: room.last_activity, reverse=True)


def select_recent_rooms(rooms: Sequence[Room], now: Optional[datetime] = None) -> List[Room]:
    now = now or utc_now()
    selected: List[Room] = []
    for room in sort_rooms_by_activity(rooms):
        if not is_recent(room.last_activity, now, ROOM_LOOKBACK_HOURS):
            break
        selected.append(room)
    return selected


def filter_messages_by_time(
    messages: Sequence[Message],
    now: Optional[datetime] = None,
    hours: int = ROOM_LOOKBACK_HOURS,
) -> List[Message]:
    """Return the leading run of messages newer than the cutoff."""
    now = now or utc_now()
    recents: List[Message] = []
    for message in messages:
        if not is_recent(message.created, now, hours):
            break
        recents.append(message)
    return recents
