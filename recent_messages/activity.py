"""Activity/response plumbing shared by feed handlers.

An activity carries the response the caller reads back: ``Data`` holds the
payload (or an ``ErrorText`` object) and ``ErrorCode`` is 0 on success.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from recent_messages.providers.webex_client import ApiResponse


logger = logging.getLogger(__name__)


class ActivityResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    data: Any = Field(default=None, alias="Data")
    error_code: int = Field(default=0, alias="ErrorCode")


class Activity(BaseModel):
    response: ActivityResponse = Field(default_factory=ActivityResponse, alias="Response")

    model_config = ConfigDict(populate_by_name=True)

    def to_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


def _error_text(response: ApiResponse) -> str:
    body = response.body
    if isinstance(body, dict):
        message = body.get("message") or body.get("ErrorText")
        if message:
            return str(message)
    return f"Request failed with status {response.status_code}"


def is_error_response(activity: Activity, response: ApiResponse) -> bool:
    """Record a non-2xx response on the activity and report whether it failed."""
    if response.ok:
        return False
    activity.response.error_code = response.status_code
    activity.response.data = {"ErrorText": _error_text(response)}
    logger.warning("API error response %s: %s", response.status_code, activity.response.data["ErrorText"])
    return True


def handle_error(activity: Activity, error: BaseException) -> None:
    logger.exception("Activity failed: %s", error)
    activity.response.error_code = 500
    activity.response.data = {"ErrorText": str(error)}
