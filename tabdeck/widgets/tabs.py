"""Tab bar and pane widgets for tabdeck."""

from __future__ import annotations

from textual.containers import Horizontal
from textual.widgets import Static

from ..core import SessionRegistry, Tab


def tab_label(
    tab: Tab,
    position: int,
    *,
    active: bool,
    in_split: bool,
    numbered: bool = True,
) -> tuple[str, str]:
    """Return ``(label, css_classes)`` for one tab button."""
    label = tab.display_title
    if numbered:
        label = f"{position}:{label}"
    # Mark split panes in tab bar
    if in_split:
        label = f"◧ {label}"
    cls = "tab-btn tab-active" if active else "tab-btn tab-inactive"
    if in_split:
        cls += " tab-in-split"
    return label, cls


class TabButton(Static):
    """A clickable tab label in the tab bar."""

    def __init__(self, label: str, tab_id: int, **kwargs) -> None:
        super().__init__(label, **kwargs)
        self.tab_id = tab_id

    def on_click(self) -> None:
        registry: SessionRegistry = self.app.registry
        allowed = registry.affordances(self.tab_id)
        if allowed is not None and allowed.can_activate:
            registry.activate(self.tab_id)


class TabBar(Horizontal):
    """Horizontal tab bar showing the registry's tabs."""

    def update_tabs(self, registry: SessionRegistry, *, numbered: bool = True) -> None:
        """Rebuild the tab bar buttons."""
        self.remove_children()
        members = registry.split_members
        for position, tab in enumerate(registry.list(), start=1):
            label, cls = tab_label(
                tab,
                position,
                active=tab.id == registry.active_id,
                in_split=tab.id in members,
                numbered=numbered,
            )
            self.mount(TabButton(f" {label} ", tab_id=tab.id, classes=cls))


class PaneView(Static):
    """Placeholder body for one visible tab; real content is drawn elsewhere."""

    def __init__(self, tab: Tab, *, focused: bool, **kwargs) -> None:
        target = ""
        if tab.bound_target is not None:
            target = f"\n{tab.bound_target.display_name}"
        super().__init__(
            f"{tab.display_title} [{tab.kind.value}]{target}",
            classes="pane pane-focused" if focused else "pane",
            **kwargs,
        )
        self.tab_id = tab.id
