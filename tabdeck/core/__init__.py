"""Tab lifecycle core: registry, titles, split membership and focus."""

from .affordances import TabAffordances, affordances_for
from .focus import HOME_TAB_ID, next_active_after_removal, visible_pane_ids
from .kinds import DEFAULT_TITLES, TabKind, parse_kind
from .models import BoundTarget, CallbackResource, ResourceHandle, Tab, TeardownError
from .registry import SessionRegistry
from .split import MAX_SPLIT_PANES, SplitCoordinator
from .titles import split_suffix, uniquify

__all__ = [
    "BoundTarget",
    "CallbackResource",
    "DEFAULT_TITLES",
    "HOME_TAB_ID",
    "MAX_SPLIT_PANES",
    "ResourceHandle",
    "SessionRegistry",
    "SplitCoordinator",
    "Tab",
    "TabAffordances",
    "TabKind",
    "TeardownError",
    "affordances_for",
    "next_active_after_removal",
    "parse_kind",
    "split_suffix",
    "uniquify",
    "visible_pane_ids",
]
