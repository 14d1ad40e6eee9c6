from __future__ import annotations

from typing import List


def clip(text: str, limit: int = 100) -> str:
    """Flatten whitespace and cut long message bodies."""
    flat = " ".join(text.split())
    if len(flat) <= limit:
        return flat
    return flat[: limit - 1].rstrip() + "…"


def feed_section(title: str, count: int, lines: List[str]) -> str:
    heading = f"{title} ({count})"
    if not lines:
        return f"{heading}\n(none)"
    return "\n".join([heading] + [f"• {line}" for line in lines])
