from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Message(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    room_id: str
    room_type: str = "group"
    text: Optional[str] = None
    html: Optional[str] = None
    created: datetime
    person_id: str
    mentioned_people: Optional[List[str]] = None
