"""
Split a model reply into the answer bubbles shown in the chat view.
"""
from typing import Optional

BULLET = "* "


def parse_answer(raw: Optional[str]) -> list[str]:
    if not raw:
        return []
    return [part.strip() for part in raw.split(BULLET) if part.strip()]
