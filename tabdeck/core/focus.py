"""Which tab holds focus, and which panes are on screen."""

from __future__ import annotations

from collections.abc import Sequence

HOME_TAB_ID = 1


def next_active_after_removal(
    removed_id: int,
    previous_active_id: int,
    remaining_split_members: Sequence[int],
    remaining_tab_ids: Sequence[int],
) -> int:
    """Pick the focused tab once *removed_id* is gone.

    Focus only moves if the removed tab had it.  It then prefers staying
    inside the split view (first remaining member), then the first tab in
    order, then home.  *remaining_split_members* is the membership after
    the split coordinator has already done its own cleanup.
    """
    if removed_id != previous_active_id:
        return previous_active_id
    if remaining_split_members:
        return remaining_split_members[0]
    if remaining_tab_ids:
        return remaining_tab_ids[0]
    return HOME_TAB_ID


def visible_pane_ids(active_id: int, split_members: Sequence[int]) -> list[int]:
    """Tabs drawn simultaneously: the active one first, then the other split members."""
    if not split_members:
        return [active_id]
    return [active_id, *(tab_id for tab_id in split_members if tab_id != active_id)]
