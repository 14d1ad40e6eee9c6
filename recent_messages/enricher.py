from __future__ import annotations

from typing import Iterable, List, Sequence

from recent_messages.models.feed_models import DisplayItem
from recent_messages.models.person_models import Person


def room_initials(room_name: str | None, room_type: str) -> str:
    """First letters of up to two words; group rooms get a single letter."""
    initials = ""
    for word in (room_name or "").split(" ")[:2]:
        initials += word[:1]
        if room_type == "group":
            break
    return initials


def extend_properties(me: Person, user: Person, items: Iterable[DisplayItem]) -> None:
    """Copy a resolved user's identity onto the items they authored."""
    for item in items:
        if item.person_id == me.id:
            item.display_name = "You"
        elif item.person_id == user.id:
            item.display_name = user.display_name
            item.avatar = user.avatar

        # direct rooms are titled after the other participant
        if item.gtype == "first" and item.title == "direct" and item.room_name == user.display_name:
            item.room_avatar = user.avatar


def enrich(me: Person, users: Sequence[Person], items: Iterable[DisplayItem]) -> None:
    pending: List[DisplayItem] = list(items)
    for item in pending:
        if item.person_id == me.id:
            item.display_name = "You"

    for user in users:
        extend_properties(me, user, pending)

    for item in pending:
        if item.gtype == "first" and not item.room_avatar:
            item.initials = room_initials(item.room_name, item.title)
