"""Runtime track identifiers."""

from __future__ import annotations

import re

_GROUP_ID_RE = re.compile(r"^(\d+)-")


def create_track_id(group_id: int, group_index: int) -> str:
    """Create a runtime track id from the datastore id and the group index."""

    return f"{group_id}-{group_index}"


def extract_group_id(track_id: str) -> int:
    """Return the group id of ``track_id`` or -1 when it does not match."""

    match = _GROUP_ID_RE.match(track_id)
    return int(match.group(1)) if match else -1
