"""Helpers for locating the JSX tag around a match."""

from __future__ import annotations

import re

_TAG_NAME_RE = re.compile(r"[A-Za-z_$][\w$-]*(?:\.[A-Za-z_$][\w$-]*)*")


def opening_tag_name(content: str, offset: int) -> str | None:
    """Name of the JSX tag still open at ``offset``, e.g. ``Foo.Bar``."""
    last_lt = content.rfind("<", 0, offset + 1)
    last_gt = content.rfind(">", 0, offset + 1)
    if last_lt == -1 or last_lt < last_gt:
        return None

    m = _TAG_NAME_RE.match(content, last_lt + 1)
    return m.group(0) if m else None


def is_component_tag(tag_name: str | None) -> bool:
    """React components start with an uppercase letter; host tags do not."""
    if not tag_name:
        return False
    return tag_name.split(".")[0][:1].isupper()
