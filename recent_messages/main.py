from __future__ import annotations

import json
import logging
import sys

from recent_messages.activity import Activity
from recent_messages.aggregator import run
from recent_messages.config import Settings
from recent_messages.models.feed_models import Feed
from recent_messages.providers.webex_client import WebexClient
from recent_messages.summarizer import make_digest


logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger("recent-messages")


def main() -> int:
    settings = Settings.load()
    if settings.debug_providers:
        logging.getLogger().setLevel(logging.DEBUG)

    activity = Activity()
    with WebexClient(settings.webex_api_url, settings.webex_access_token, timeout=settings.request_timeout) as client:
        run(
            activity,
            client,
            max_workers=settings.max_workers,
            message_window_hours=settings.message_window_hours,
        )

    if activity.response.error_code != 0:
        logger.error("Recent messages failed (%s): %s", activity.response.error_code, activity.response.data)
        print(json.dumps(activity.to_dict(), indent=2, ensure_ascii=False))
        return 1

    if settings.output_format == "text":
        print(make_digest(Feed.model_validate(activity.response.data), settings.tz))
    else:
        print(json.dumps(activity.to_dict(), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
