"""Recent messages activity.

Builds the feed widget payload in two phases:

1) Gather: rooms (newest first, inside the lookback), every selected room's
   messages fetched concurrently, then the caller's own identity.
2) Consume: per room, up to 3 message items and up to 3 mention items of the
   caller, each author's details fetched once, identities merged onto the
   items, and mention names highlighted.

Room, message and identity failures abort the whole activity. A failed author
lookup only leaves that author's items without a display name.
"""

from __future__ import annotations

import logging
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from datetime import datetime
from typing import Dict, List, Optional, Protocol, Sequence

from recent_messages.activity import Activity, handle_error, is_error_response
from recent_messages.enricher import enrich
from recent_messages.mentions import match_mentions
from recent_messages.models.feed_models import DisplayItem, Feed
from recent_messages.models.message_models import Message
from recent_messages.models.person_models import Person
from recent_messages.models.room_models import Room
from recent_messages.providers.webex_client import ApiResponse
from recent_messages.recency import ROOM_LOOKBACK_HOURS, filter_messages_by_time, select_recent_rooms
from recent_messages.utils.dates import utc_now


logger = logging.getLogger(__name__)

MAX_ITEMS_PER_ROOM = 3


class MessagingApi(Protocol):
    def list_rooms(self) -> ApiResponse:
        ...

    def list_messages(self, room_id: str) -> ApiResponse:
        ...

    def get_me(self) -> ApiResponse:
        ...

    def get_person(self, person_id: str) -> ApiResponse:
        ...


def _room_name(rooms: Sequence[Room], room_id: str) -> Optional[str]:
    for room in rooms:
        if room.id == room_id:
            return room.title
    return None


def _submit_user_fetch(
    pool: Executor,
    api: MessagingApi,
    user_futures: Dict[str, Future],
    person_id: str,
) -> None:
    if person_id not in user_futures:
        user_futures[person_id] = pool.submit(api.get_person, person_id)


def build_message_items(room_messages: Sequence[Message], rooms: Sequence[Room]) -> List[DisplayItem]:
    """Up to 3 items for one room, tagged first/last for grouping in the widget."""
    items: List[DisplayItem] = []
    for raw in room_messages:
        if len(items) == MAX_ITEMS_PER_ROOM:
            break
        # file-only messages have no text
        if not raw.text:
            continue
        item = DisplayItem.from_message(raw)
        if not items:
            item.gtype = "first"
            item.room_name = _room_name(rooms, raw.room_id)
        items.append(item)

    if len(items) > 1:
        items[-1].gtype = "last"
        items[-1].hidden_count = len(room_messages) - MAX_ITEMS_PER_ROOM
    return items


def build_mention_items(room_messages: Sequence[Message], rooms: Sequence[Room], me_id: str) -> List[DisplayItem]:
    """Up to 3 items for messages in one room that mention the caller."""
    items: List[DisplayItem] = []
    for raw in room_messages:
        if len(items) == MAX_ITEMS_PER_ROOM:
            break
        if not raw.mentioned_people or not raw.text:
            continue
        if me_id not in raw.mentioned_people:
            continue

        item = DisplayItem.from_message(raw)
        count = len(items) + 1
        if count == 1:
            item.gtype = "first"
            item.room_name = _room_name(rooms, raw.room_id)
        elif count == len(raw.mentioned_people) - 1 or count == MAX_ITEMS_PER_ROOM:
            item.gtype = "last"
        items.append(item)
    return items


def _fetch_room_messages(
    pool: Executor,
    api: MessagingApi,
    rooms: Sequence[Room],
    activity: Activity,
) -> Optional[List[List[Message]]]:
    futures = [pool.submit(api.list_messages, room.id) for room in rooms]
    # wait for every room before looking at any of them
    responses = [future.result() for future in futures]

    per_room: List[List[Message]] = []
    for response in responses:
        if is_error_response(activity, response):
            return None
        per_room.append([Message.model_validate(raw) for raw in response.body.get("items", [])])
    return per_room


def _resolve_users(user_futures: Dict[str, Future], activity: Activity) -> List[Person]:
    users: List[Person] = []
    for person_id, future in user_futures.items():
        try:
            response = future.result()
        except Exception as exc:  # noqa: BLE001
            logger.warning("User lookup failed for %s: %s", person_id, exc)
            continue
        if is_error_response(activity, response):
            logger.warning("Skipping user %s", person_id)
            continue
        users.append(Person.model_validate(response.body))
    return users


def build_feed(
    activity: Activity,
    api: MessagingApi,
    pool: Executor,
    now: datetime,
    message_window_hours: int = ROOM_LOOKBACK_HOURS,
) -> Optional[Feed]:
    """Run both phases. Returns None when a fatal error was recorded on the activity."""
    rooms_response = api.list_rooms()
    if is_error_response(activity, rooms_response):
        return None
    rooms = [Room.model_validate(raw) for raw in rooms_response.body.get("items", [])]

    selected = select_recent_rooms(rooms, now)
    logger.info("Fetching messages for %d of %d rooms", len(selected), len(rooms))

    per_room = _fetch_room_messages(pool, api, selected, activity)
    if per_room is None:
        return None
    filtered = [filter_messages_by_time(messages, now, message_window_hours) for messages in per_room]

    me_response = api.get_me()
    if is_error_response(activity, me_response):
        return None
    me = Person.model_validate(me_response.body)

    feed = Feed()
    user_futures: Dict[str, Future] = {}
    for room_messages in filtered:
        feed.messages.count += len(room_messages)

        message_items = build_message_items(room_messages, rooms)
        mention_items = build_mention_items(room_messages, rooms, me.id)
        for item in message_items + mention_items:
            _submit_user_fetch(pool, api, user_futures, item.person_id)

        feed.messages.items.extend(message_items)
        feed.mentions.items.extend(mention_items)
        feed.mentions.count += len(mention_items)

    users = _resolve_users(user_futures, activity)
    logger.info(
        "Resolved %d of %d authors for %d messages and %d mentions",
        len(users),
        len(user_futures),
        len(feed.messages.items),
        len(feed.mentions.items),
    )
    enrich(me, users, feed.messages.items)
    enrich(me, users, feed.mentions.items)

    match_mentions(feed.messages.items)
    match_mentions(feed.mentions.items)
    return feed


def run(
    activity: Activity,
    api: MessagingApi,
    now: Optional[datetime] = None,
    max_workers: int = 8,
    message_window_hours: int = ROOM_LOOKBACK_HOURS,
) -> None:
    """Fill activity.response with the recent messages feed or an error."""
    try:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            feed = build_feed(activity, api, pool, now or utc_now(), message_window_hours)
        if feed is None:
            return

        activity.response.data = feed.to_payload()
        # a skipped author lookup may have set the error code
        activity.response.error_code = 0
    except Exception as exc:  # noqa: BLE001
        handle_error(activity, exc)
