"""Main tabdeck application."""

from __future__ import annotations

from collections.abc import Iterable

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.widgets import Static

from .core import SessionRegistry, TabKind, TeardownError
from .log import logger
from .preferences import Preferences, load_preferences
from .theme import get_theme
from .widgets import PaneView, TabBar


class TabDeckApp(App):
    """Tab bar plus the panes of the focused tab (and its split partners)."""

    TITLE = "tabdeck"
    CSS = """
    #tab-bar {
        height: 1;
        background: $panel;
    }
    .tab-btn {
        width: auto;
        padding: 0 1;
    }
    .tab-active {
        background: $primary;
        text-style: bold;
    }
    .tab-in-split {
        text-style: underline;
    }
    #workspace {
        height: 1fr;
    }
    .pane {
        width: 1fr;
        height: 1fr;
        border: round $accent;
        padding: 0 1;
    }
    .pane-focused {
        border: round $primary;
    }
    #status-bar {
        height: 1;
        color: $secondary;
    }
    """
    BINDINGS = [
        Binding("ctrl+t", "new_terminal", "New", show=True),
        Binding("ctrl+w", "close_tab", "Close", show=True),
        Binding("ctrl+s", "split_next", "Split", show=True),
        Binding("ctrl+u", "split_off", "Unsplit", show=True),
        Binding("ctrl+pagedown", "next_tab", "Next tab", show=False),
        Binding("ctrl+pageup", "prev_tab", "Previous tab", show=False),
        Binding("alt+right", "move_tab(1)", "Move right", show=False),
        Binding("alt+left", "move_tab(-1)", "Move left", show=False),
        Binding("ctrl+q", "quit", "Quit", show=True),
    ]

    def __init__(
        self,
        registry: SessionRegistry | None = None,
        prefs: Preferences | None = None,
        open_titles: Iterable[str] = (),
        split_opened: bool = False,
    ) -> None:
        super().__init__()
        self._prefs = prefs or load_preferences()
        self.registry = registry or SessionRegistry(
            default_titles=self._prefs.titles.defaults,
            max_split=self._prefs.split.max_panes,
        )
        self._open_titles = list(open_titles)
        self._split_opened = split_opened

    # ── Layout ──────────────────────────────────────────────────

    def compose(self) -> ComposeResult:
        yield TabBar(id="tab-bar")
        yield Horizontal(id="workspace")
        yield Static("", id="status-bar")

    def on_mount(self) -> None:
        theme = get_theme(self._prefs.display.theme)
        self.register_theme(theme)
        self.theme = theme.name

        self.registry.on_change = self._refresh
        opened = [
            self.registry.create(TabKind.TERMINAL, title) for title in self._open_titles
        ]
        if self._split_opened and len(opened) >= 2:
            # The last opened tab has focus; its siblings join it in the split.
            for tab_id in opened[:-1]:
                self.registry.toggle_split(tab_id)
        self._refresh()

    def on_unmount(self) -> None:
        self.registry.on_change = None
        try:
            self.registry.close()
        except TeardownError as exc:
            for tab_id, err in exc.failures:
                logger.warning("tab %d did not release cleanly: %s", tab_id, err)

    def _refresh(self) -> None:
        registry = self.registry
        self.query_one("#tab-bar", TabBar).update_tabs(
            registry, numbered=self._prefs.display.show_tab_numbers
        )

        workspace = self.query_one("#workspace", Horizontal)
        workspace.remove_children()
        for tab_id in registry.visible_ids():
            tab = registry.get(tab_id)
            if tab is not None:
                workspace.mount(PaneView(tab, focused=tab_id == registry.active_id))

        split = registry.split_members
        status = f"{len(registry)} tabs"
        if split:
            status += f" | split {len(split)}/{registry.split_capacity}"
        self.query_one("#status-bar", Static).update(status)

    # ── Actions ─────────────────────────────────────────────────

    def action_new_terminal(self) -> None:
        self.registry.create(TabKind.TERMINAL)

    def action_close_tab(self) -> None:
        registry = self.registry
        allowed = registry.affordances(registry.active_id)
        if allowed is None or not allowed.can_close:
            self.bell()
            return
        registry.remove(registry.active_id)

    def action_split_next(self) -> None:
        """Add the next tab after the focused one that may join the split."""
        registry = self.registry
        tabs = registry.list()
        start = registry.index_of(registry.active_id) or 0
        for offset in range(1, len(tabs)):
            tab = tabs[(start + offset) % len(tabs)]
            if tab.id in registry.split_members:
                continue
            allowed = registry.affordances(tab.id)
            if allowed is not None and allowed.can_split:
                registry.toggle_split(tab.id)
                return
        self.bell()

    def action_split_off(self) -> None:
        # Toggling out down to one member clears the whole split.
        while self.registry.split_members:
            self.registry.toggle_split(self.registry.split_members[0])

    def _cycle(self, step: int) -> None:
        registry = self.registry
        tabs = registry.list()
        start = registry.index_of(registry.active_id) or 0
        for offset in range(1, len(tabs)):
            tab = tabs[(start + step * offset) % len(tabs)]
            allowed = registry.affordances(tab.id)
            if allowed is not None and allowed.can_activate:
                registry.activate(tab.id)
                return

    def action_next_tab(self) -> None:
        self._cycle(1)

    def action_prev_tab(self) -> None:
        self._cycle(-1)

    def action_move_tab(self, step: int) -> None:
        index = self.registry.index_of(self.registry.active_id)
        if index is not None:
            self.registry.reorder(index, index + step)
