"""Per-tab actions the tab bar should offer, given the current layout."""

from __future__ import annotations

from dataclasses import dataclass

from .kinds import is_closable, is_global_surface, is_splittable
from .models import Tab
from .split import SplitCoordinator


@dataclass(frozen=True)
class TabAffordances:
    can_activate: bool
    can_split: bool
    can_close: bool


def affordances_for(
    tab: Tab,
    active_tab: Tab | None,
    split: SplitCoordinator,
) -> TabAffordances:
    """Work out which buttons are live for *tab*.

    While a split is on, split members and the focused tab are locked in
    place (no close, no activate) and full-window surfaces cannot be
    focused, since they would hide the panes.
    """
    is_active = active_tab is not None and tab.id == active_tab.id
    is_member = tab.id in split
    split_on = split.active

    can_close = is_closable(tab.kind) and not is_member and not (split_on and is_active)

    active_is_surface = active_tab is not None and is_global_surface(active_tab.kind)
    can_split = (
        is_splittable(tab.kind)
        and not is_active
        and not active_is_surface
        and (is_member or not split.is_full)
    )

    can_activate = not is_member and not (split_on and is_global_surface(tab.kind))

    return TabAffordances(
        can_activate=can_activate,
        can_split=can_split,
        can_close=can_close,
    )
