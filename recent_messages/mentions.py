"""Mention highlighting for feed items.

Webex marks mentions in the HTML body as
``<spark-mention data-object-type="person" ...>Name</spark-mention>``. The
names are pulled out with a fixed pattern and then highlighted in the plain
text description by literal substitution.
"""

from __future__ import annotations

import re
from typing import Iterable, List

from recent_messages.models.feed_models import DisplayItem


MENTION_PATTERN = re.compile(
    r"<spark-mention.*?>"
    r"(?P<name>(?:[\w\n ().,\-:;@#$%^&*\[\]\"'+–/®°⁰!?{}|`~])+?)"
    r"(?=</spark-mention>)"
)


def extract_mention_names(html: str) -> List[str]:
    """Distinct mention names in order of first appearance."""
    names: List[str] = []
    for match in MENTION_PATTERN.finditer(html):
        name = match.group("name")
        if name not in names:
            names.append(name)
    return names


def style_mention(name: str) -> str:
    return f'<span class="blue">@{name}</span>'


def match_mentions(items: Iterable[DisplayItem]) -> None:
    for item in items:
        if not item.raw.html:
            continue
        for name in extract_mention_names(item.raw.html):
            item.description = item.description.replace(name, style_mention(name))
