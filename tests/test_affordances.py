"""Tests for tabdeck.core.affordances -- which tab actions are live."""

from __future__ import annotations

from tabdeck.core import SessionRegistry, TabKind


class TestWithoutSplit:
    def test_home_cannot_close(self, registry):
        allowed = registry.affordances(1)
        assert allowed.can_close is False
        assert allowed.can_activate is True

    def test_terminal_can_close_and_activate(self, registry):
        a = registry.create(TabKind.TERMINAL)
        registry.create(TabKind.TERMINAL)
        allowed = registry.affordances(a)
        assert allowed.can_close is True
        assert allowed.can_activate is True
        assert allowed.can_split is True

    def test_active_tab_cannot_split(self, registry):
        a = registry.create(TabKind.TERMINAL)
        assert registry.affordances(a).can_split is False

    def test_unsplittable_kind(self, registry):
        tunnel = registry.create(TabKind.TUNNEL)
        registry.create(TabKind.TERMINAL)
        assert registry.affordances(tunnel).can_split is False

    def test_no_split_while_global_surface_focused(self, registry):
        a = registry.create(TabKind.TERMINAL)
        registry.create(TabKind.ADMIN)
        assert registry.affordances(a).can_split is False

    def test_unknown_tab(self, registry):
        assert registry.affordances(99) is None


class TestWithSplit:
    def _split_registry(self) -> tuple[SessionRegistry, list[int]]:
        registry = SessionRegistry()
        ids = [registry.create(TabKind.TERMINAL) for _ in range(3)]
        registry.activate(ids[0])
        registry.toggle_split(ids[1])
        registry.toggle_split(ids[2])
        return registry, ids

    def test_members_locked(self):
        registry, ids = self._split_registry()
        allowed = registry.affordances(ids[1])
        assert allowed.can_close is False
        assert allowed.can_activate is False
        assert allowed.can_split is True  # can still be toggled out

    def test_focused_tab_cannot_close(self):
        registry, ids = self._split_registry()
        assert registry.affordances(ids[0]).can_close is False

    def test_home_cannot_be_activated(self):
        registry, _ids = self._split_registry()
        assert registry.affordances(1).can_activate is False

    def test_full_split_blocks_new_members(self):
        registry = SessionRegistry(max_split=2)
        ids = [registry.create(TabKind.TERMINAL) for _ in range(4)]
        registry.activate(ids[0])
        registry.toggle_split(ids[1])
        registry.toggle_split(ids[2])
        assert registry.affordances(ids[3]).can_split is False
        assert registry.affordances(ids[2]).can_split is True
