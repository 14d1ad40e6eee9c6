from __future__ import annotations

from typing import List

from recent_messages.models.feed_models import DisplayItem, Feed
from recent_messages.utils.dates import pretty_day_header, pretty_time
from recent_messages.utils.formatting import clip, feed_section


def _item_line(item: DisplayItem, tz: str) -> str:
    who = item.display_name or item.person_id
    text = clip(item.raw.text or item.description)
    line = f"{pretty_time(item.date, tz)} {who}: {text}"
    if item.room_name:
        line = f"[{item.room_name}] {line}"
    return line


def _items_lines(items: List[DisplayItem], tz: str) -> List[str]:
    lines: List[str] = []
    for item in items:
        line = _item_line(item, tz)
        # zero or negative counts mean nothing was cut off
        if item.gtype == "last" and item.hidden_count and item.hidden_count > 0:
            line += f" (+{item.hidden_count} more)"
        lines.append(line)
    return lines


def make_digest(feed: Feed, tz: str) -> str:
    header = f"Recent messages — {pretty_day_header(tz)}"

    messages_sec = feed_section("💬 Messages", feed.messages.count, _items_lines(feed.messages.items, tz))
    mentions_sec = feed_section("📣 Mentions", feed.mentions.count, _items_lines(feed.mentions.items, tz))

    parts = [header, "", messages_sec, "", mentions_sec]
    return "\n".join(parts)
