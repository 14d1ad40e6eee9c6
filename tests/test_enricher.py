from __future__ import annotations

from datetime import datetime, timezone

from recent_messages.enricher import enrich, extend_properties, room_initials
from recent_messages.models.feed_models import DisplayItem
from recent_messages.models.message_models import Message
from recent_messages.models.person_models import Person

ME = Person(id="me", display_name="Me Myself")


def _item(person_id: str, room_type: str = "group", gtype=None, room_name=None) -> DisplayItem:
    raw = Message(
        id=f"m-{person_id}",
        room_id="A",
        room_type=room_type,
        text="hi",
        created=datetime(2024, 1, 1, tzinfo=timezone.utc),
        person_id=person_id,
    )
    item = DisplayItem.from_message(raw)
    item.gtype = gtype
    item.room_name = room_name
    return item


def test_room_initials() -> None:
    assert room_initials("Alice Smith", "direct") == "AS"
    assert room_initials("Alice Beth Smith", "direct") == "AB"
    assert room_initials("Project Phoenix", "group") == "P"
    assert room_initials("Solo", "direct") == "S"
    assert room_initials(None, "group") == ""


def test_copies_name_and_avatar_for_matching_author() -> None:
    user = Person(id="p1", display_name="Pat Doe", avatar="https://avatar/p1")
    mine = _item("me")
    theirs = _item("p1")
    other = _item("p2")

    extend_properties(ME, user, [mine, theirs, other])

    assert mine.display_name == "You"
    assert mine.avatar is None
    assert theirs.display_name == "Pat Doe"
    assert theirs.avatar == "https://avatar/p1"
    assert other.display_name is None


def test_direct_room_avatar_only_when_name_matches() -> None:
    user = Person(id="p1", display_name="Pat Doe", avatar="https://avatar/p1")
    matching = _item("p1", room_type="direct", gtype="first", room_name="Pat Doe")
    other = _item("p1", room_type="direct", gtype="first", room_name="Sam Roe")

    enrich(ME, [user], [matching, other])

    assert matching.room_avatar == "https://avatar/p1"
    assert matching.initials is None
    assert other.room_avatar is None
    assert other.initials == "SR"


def test_only_first_items_get_room_avatars() -> None:
    user = Person(id="p1", display_name="Pat Doe", avatar="https://avatar/p1")
    item = _item("p1", room_type="direct", gtype="last", room_name="Pat Doe")

    enrich(ME, [user], [item])

    assert item.room_avatar is None
    assert item.initials is None


def test_own_items_and_initials_without_any_resolved_users() -> None:
    mine = _item("me", room_type="direct", gtype="first", room_name="Pat Doe")
    theirs = _item("p1", gtype="first", room_name="design team")

    enrich(ME, [], [mine, theirs])

    assert mine.display_name == "You"
    assert mine.initials == "PD"
    assert theirs.display_name is None
    assert theirs.initials == "d"
