from __future__ import annotations

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from recent_messages.models.message_models import Message


class DisplayItem(BaseModel):
    """A message shaped for the feed widget.

    Built by the aggregator, then filled in place by the enricher and the
    mention styler.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    title: str
    description: str
    date: datetime
    person_id: str
    raw: Message
    gtype: Optional[Literal["first", "last"]] = None
    room_name: Optional[str] = None
    room_avatar: Optional[str] = None
    initials: Optional[str] = None
    hidden_count: Optional[int] = None
    display_name: Optional[str] = None
    avatar: Optional[str] = None

    @classmethod
    def from_message(cls, raw: Message) -> "DisplayItem":
        return cls(
            id=raw.id,
            title=raw.room_type,
            description=raw.text or "",
            date=raw.created,
            person_id=raw.person_id,
            raw=raw,
        )


class FeedSection(BaseModel):
    count: int = 0
    items: List[DisplayItem] = Field(default_factory=list)


class Feed(BaseModel):
    messages: FeedSection = Field(default_factory=FeedSection)
    mentions: FeedSection = Field(default_factory=FeedSection)

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
