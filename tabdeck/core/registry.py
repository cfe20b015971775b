"""The session registry: single owner of the open tabs.

All structural changes (create, remove, activate, split toggles, reorder,
renames) go through :class:`SessionRegistry`.  Transitions are synchronous
and complete before the method returns; the only work handed to the
outside world is a tab's ``resource.release()``, which runs after the
registry's own bookkeeping is already consistent.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import replace

from ..log import logger
from .affordances import TabAffordances, affordances_for
from .focus import HOME_TAB_ID, next_active_after_removal, visible_pane_ids
from .kinds import (
    DEFAULT_TITLES,
    TabKind,
    is_merge_eligible,
    needs_unique_title,
    owns_resource,
    parse_kind,
    title_from_target,
)
from .models import BoundTarget, ResourceHandle, Tab, TeardownError
from .split import MAX_SPLIT_PANES, SplitCoordinator
from .titles import uniquify


class SessionRegistry:
    """Ordered tabs, id allocation, split membership and focus.

    The home tab (id 1) is seeded on construction and survives every
    removal request.  Set :attr:`on_change` to be told after each
    transition that changed something.
    """

    def __init__(
        self,
        *,
        default_titles: Mapping[TabKind | str, str] | None = None,
        max_split: int = MAX_SPLIT_PANES,
    ) -> None:
        self._default_titles: dict[TabKind, str] = dict(DEFAULT_TITLES)
        for key, value in (default_titles or {}).items():
            if value and str(value).strip():
                self._default_titles[parse_kind(key)] = str(value).strip()

        self._tabs: list[Tab] = [
            Tab(
                id=HOME_TAB_ID,
                kind=TabKind.HOME,
                title=self._default_titles[TabKind.HOME],
            )
        ]
        self._next_id = HOME_TAB_ID + 1
        self._active_id = HOME_TAB_ID
        self._split = SplitCoordinator(max_split)
        self._reordering = False

        self.on_change: Callable[[], None] | None = None

    # ------------------------------------------------------------------
    # Read side
    # ------------------------------------------------------------------

    def get(self, tab_id: int) -> Tab | None:
        index = self._index_of(tab_id)
        return None if index is None else self._tabs[index]

    def list(self) -> list[Tab]:
        """Snapshot of the tabs in display order."""
        return self._tabs.copy()

    def __len__(self) -> int:
        return len(self._tabs)

    def __contains__(self, tab_id: object) -> bool:
        return any(tab.id == tab_id for tab in self._tabs)

    def index_of(self, tab_id: int) -> int | None:
        return self._index_of(tab_id)

    @property
    def active_id(self) -> int:
        return self._active_id

    @property
    def split_members(self) -> tuple[int, ...]:
        return self._split.members

    @property
    def split_active(self) -> bool:
        return self._split.active

    @property
    def split_capacity(self) -> int:
        return self._split.capacity

    def visible_ids(self) -> list[int]:
        """Ids of the panes currently on screen, focused tab first."""
        return visible_pane_ids(self._active_id, self._split.members)

    def affordances(self, tab_id: int) -> TabAffordances | None:
        tab = self.get(tab_id)
        if tab is None:
            return None
        return affordances_for(tab, self.get(self._active_id), self._split)

    def default_title(self, kind: TabKind) -> str:
        return self._default_titles[kind]

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def create(
        self,
        kind: TabKind | str,
        title: str | None = None,
        bound_target: BoundTarget | None = None,
        *,
        resource: ResourceHandle | None = None,
        initial_view: str | None = None,
    ) -> int:
        """Open a tab (or re-focus the singleton of a merge-eligible kind).

        Returns the id of the tab that is now active.
        """
        kind = parse_kind(kind)
        if resource is not None and not owns_resource(kind):
            raise ValueError(f"{kind.value} tabs cannot own a resource handle")

        if is_merge_eligible(kind):
            existing_index = self._first_index_of_kind(kind)
            if existing_index is not None:
                existing = self._tabs[existing_index]
                self._tabs[existing_index] = replace(
                    existing,
                    bound_target=bound_target,
                    initial_view=initial_view,
                    revision=existing.revision + 1,
                )
                self._active_id = existing.id
                self._split.on_tab_merged_or_created(existing.id)
                logger.debug("merged %s into tab %d", kind.value, existing.id)
                self._notify()
                return existing.id

        if not (title and title.strip()) and bound_target is not None:
            if title_from_target(kind):
                title = bound_target.display_name

        tab_id = self._next_id
        self._next_id += 1
        tab = Tab(
            id=tab_id,
            kind=kind,
            title=self._resolve_title(kind, title),
            bound_target=bound_target,
            resource=resource,
            initial_view=initial_view,
        )
        self._tabs.append(tab)
        self._active_id = tab_id
        self._split.on_tab_merged_or_created(tab_id)
        logger.debug("created %s tab %d %r", kind.value, tab_id, tab.title)
        self._notify()
        return tab_id

    def remove(self, tab_id: int) -> None:
        """Close a tab and release its resource.

        Unknown ids and the home tab are ignored.  The record is gone,
        split membership updated and focus moved before ``release()`` runs,
        so a failing release leaves the registry consistent and a repeated
        request for the same id finds nothing left to release.
        """
        if tab_id == HOME_TAB_ID:
            logger.debug("home tab cannot be removed")
            return
        index = self._index_of(tab_id)
        if index is None:
            logger.debug("remove: no tab %s", tab_id)
            return

        tab = self._tabs.pop(index)
        self._split.on_tab_removed(tab_id)
        self._active_id = next_active_after_removal(
            tab_id,
            self._active_id,
            self._split.members,
            [t.id for t in self._tabs],
        )
        logger.debug("removed tab %d, active is now %d", tab_id, self._active_id)

        try:
            if tab.resource is not None:
                tab.resource.release()
        finally:
            self._notify()

    def activate(self, tab_id: int) -> None:
        if tab_id == self._active_id or self._index_of(tab_id) is None:
            return
        self._active_id = tab_id
        self._notify()

    def toggle_split(self, tab_id: int) -> None:
        if self._index_of(tab_id) is None:
            logger.debug("toggle_split: no tab %s", tab_id)
            return
        if self._split.toggle(tab_id):
            self._notify()

    def reorder(self, from_index: int, to_index: int) -> None:
        """Move the tab at *from_index* to *to_index* (both clamped).

        A reorder requested while another one is still running (for
        instance from an ``on_change`` handler reacting to the first) is
        dropped.
        """
        if self._reordering:
            logger.debug("reorder already in progress, dropping %d -> %d", from_index, to_index)
            return
        last = len(self._tabs) - 1
        from_index = max(0, min(from_index, last))
        to_index = max(0, min(to_index, last))
        if from_index == to_index:
            return

        self._reordering = True
        try:
            tab = self._tabs.pop(from_index)
            self._tabs.insert(to_index, tab)
            self._notify()
        finally:
            self._reordering = False

    def update_bound_target(self, target_id: int, target: BoundTarget) -> None:
        """Point every tab bound to *target_id* at the new host configuration.

        Tabs whose title follows the host are retitled (still kept unique);
        management views keep their own title.
        """
        changed = False
        for index, tab in enumerate(self._tabs):
            if tab.bound_target is None or tab.bound_target.id != target_id:
                continue
            title = tab.title
            if title_from_target(tab.kind):
                title = self._resolve_title(
                    tab.kind, target.display_name, exclude_id=tab.id
                )
            self._tabs[index] = replace(
                tab,
                bound_target=target,
                title=title,
                revision=tab.revision + 1,
            )
            changed = True
        if changed:
            self._notify()

    def update_tab(
        self,
        tab_id: int,
        *,
        title: str | None = None,
        initial_view: str | None = None,
    ) -> None:
        """Rename a tab or change the view it opens on.  Home keeps its title."""
        index = self._index_of(tab_id)
        if index is None:
            return
        tab = self._tabs[index]
        changes: dict[str, object] = {}
        if title is not None and tab.kind is not TabKind.HOME:
            new_title = self._resolve_title(tab.kind, title, exclude_id=tab.id)
            if new_title != tab.title:
                changes["title"] = new_title
        if initial_view is not None and initial_view != tab.initial_view:
            changes["initial_view"] = initial_view
        if not changes:
            return
        self._tabs[index] = replace(tab, revision=tab.revision + 1, **changes)
        self._notify()

    def close(self) -> None:
        """Remove every tab except home, releasing all resources.

        Every handle is released even if some fail; failures are raised
        together as :class:`TeardownError` at the end.
        """
        failures: list[tuple[int, BaseException]] = []
        for tab in self._tabs.copy():
            if tab.id == HOME_TAB_ID:
                continue
            try:
                self.remove(tab.id)
            except Exception as exc:
                logger.debug("release failed for tab %d", tab.id, exc_info=True)
                failures.append((tab.id, exc))
        if failures:
            raise TeardownError(failures)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _index_of(self, tab_id: int) -> int | None:
        for index, tab in enumerate(self._tabs):
            if tab.id == tab_id:
                return index
        return None

    def _first_index_of_kind(self, kind: TabKind) -> int | None:
        for index, tab in enumerate(self._tabs):
            if tab.kind is kind:
                return index
        return None

    def _resolve_title(
        self,
        kind: TabKind,
        desired: str | None,
        *,
        exclude_id: int | None = None,
    ) -> str:
        default = self._default_titles[kind]
        if not needs_unique_title(kind):
            return (desired or "").strip() or default
        taken = [
            tab.title
            for tab in self._tabs
            if tab.id != exclude_id and needs_unique_title(tab.kind)
        ]
        return uniquify(desired, taken, default=default)

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change()
