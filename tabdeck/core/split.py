"""Split-screen membership bookkeeping."""

from __future__ import annotations

from ..log import logger

MAX_SPLIT_PANES = 4


class SplitCoordinator:
    """Ordered set of tab ids shown side by side.

    Split mode is nothing more than a non-empty membership; there is no
    separate flag to fall out of sync with it.  A membership of one is
    never kept: whenever a removal leaves a single member the set is
    cleared.
    """

    def __init__(self, capacity: int = MAX_SPLIT_PANES) -> None:
        self._capacity = max(2, min(int(capacity), MAX_SPLIT_PANES))
        self._members: list[int] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def members(self) -> tuple[int, ...]:
        return tuple(self._members)

    @property
    def active(self) -> bool:
        return bool(self._members)

    @property
    def is_full(self) -> bool:
        return len(self._members) >= self._capacity

    def __contains__(self, tab_id: object) -> bool:
        return tab_id in self._members

    def __len__(self) -> int:
        return len(self._members)

    def toggle(self, tab_id: int) -> bool:
        """Add or remove *tab_id*.  Returns ``True`` if membership changed.

        Adding past capacity is ignored.
        """
        if tab_id in self._members:
            self._discard(tab_id)
            return True
        if self.is_full:
            logger.debug("split full (%d), ignoring tab %d", self._capacity, tab_id)
            return False
        self._members.append(tab_id)
        return True

    def on_tab_removed(self, tab_id: int) -> bool:
        """Forget a deleted tab.  Returns ``True`` if membership changed."""
        if tab_id not in self._members:
            return False
        self._discard(tab_id)
        return True

    def on_tab_merged_or_created(self, tab_id: int) -> bool:
        """Freshly created or re-focused tabs start outside the split."""
        return self.on_tab_removed(tab_id)

    def _discard(self, tab_id: int) -> None:
        self._members.remove(tab_id)
        if len(self._members) <= 1:
            if self._members:
                logger.debug("split collapsed, last member %d", self._members[0])
            self._members.clear()
