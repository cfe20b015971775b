"""Textual Pilot tests for TabDeckApp.

Tests use ``app.run_test()`` to spin up a headless Textual app and verify
that key bindings drive the registry.  Preferences are built in memory so
nothing touches the real user config.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from tabdeck.app import TabDeckApp
from tabdeck.core import SessionRegistry, TabKind
from tabdeck.preferences import Preferences
from tabdeck.widgets import PaneView, TabBar


# ── Fixtures ────────────────────────────────────────────────────────


@pytest.fixture()
def app():
    """A TabDeckApp with default preferences and an empty registry."""
    return TabDeckApp(prefs=Preferences())


# ── Widget-tree smoke tests ─────────────────────────────────────────


class TestAppMount:
    @pytest.mark.asyncio
    async def test_app_mounts(self, app):
        async with app.run_test(size=(120, 40)):
            assert app.query_one("#tab-bar", TabBar) is not None
            assert app.query_one("#workspace") is not None
            assert app.query_one("#status-bar") is not None

    @pytest.mark.asyncio
    async def test_home_pane_shown(self, app):
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.pause()
            panes = list(app.query(PaneView))
            assert [pane.tab_id for pane in panes] == [1]

    @pytest.mark.asyncio
    async def test_open_titles(self):
        app = TabDeckApp(prefs=Preferences(), open_titles=["web", "web", "db"])
        async with app.run_test(size=(120, 40)):
            titles = [tab.title for tab in app.registry.list()]
            assert titles == ["Home", "web", "web (2)", "db"]
            assert app.registry.active_id == 4

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "titles, opened",
        [
            (["a", "b"], [2, 3]),
            (["a", "b", "c"], [2, 3, 4]),
        ],
    )
    async def test_open_titles_split_shows_every_opened_tab(self, titles, opened):
        app = TabDeckApp(prefs=Preferences(), open_titles=titles, split_opened=True)
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.pause()
            registry = app.registry
            assert registry.active_id == opened[-1]
            assert registry.split_members == tuple(opened[:-1])
            assert registry.visible_ids() == [opened[-1], *opened[:-1]]
            assert sorted(registry.visible_ids()) == opened


# ── Key-binding tests ───────────────────────────────────────────────


class TestNewTab:
    """Ctrl+T opens a terminal tab."""

    @pytest.mark.asyncio
    async def test_new_tab_increases_count(self, app):
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.press("ctrl+t")
            await pilot.press("ctrl+t")
            titles = [tab.title for tab in app.registry.list()]
            assert titles == ["Home", "Terminal", "Terminal (2)"]
            assert app.registry.active_id == 3


class TestCloseTab:
    @pytest.mark.asyncio
    async def test_close_active_tab(self, app):
        async with app.run_test(size=(120, 40)) as pilot:
            app.action_new_terminal()
            app.action_close_tab()
            await pilot.pause()
            assert len(app.registry) == 1
            assert app.registry.active_id == 1

    @pytest.mark.asyncio
    async def test_home_not_closed(self, app):
        async with app.run_test(size=(120, 40)) as pilot:
            app.action_close_tab()
            await pilot.pause()
            assert len(app.registry) == 1

    @pytest.mark.asyncio
    async def test_close_releases_resource(self, app):
        handle = MagicMock()
        async with app.run_test(size=(120, 40)) as pilot:
            app.registry.create(TabKind.TERMINAL, "db", resource=handle)
            app.action_close_tab()
            await pilot.pause()
            handle.release.assert_called_once_with()


class TestSplit:
    @pytest.mark.asyncio
    async def test_split_next_and_off(self, app):
        async with app.run_test(size=(120, 40)) as pilot:
            for _ in range(3):
                app.action_new_terminal()
            app.registry.activate(2)
            app.action_split_next()
            app.action_split_next()
            await pilot.pause()
            assert app.registry.split_members == (3, 4)
            assert app.registry.visible_ids() == [2, 3, 4]
            app.action_split_off()
            await pilot.pause()
            assert app.registry.split_members == ()


class TestCycleAndMove:
    @pytest.mark.asyncio
    async def test_next_and_previous(self, app):
        async with app.run_test(size=(120, 40)) as pilot:
            app.action_new_terminal()
            app.action_new_terminal()
            app.action_next_tab()
            await pilot.pause()
            assert app.registry.active_id == 1
            app.action_prev_tab()
            await pilot.pause()
            assert app.registry.active_id == 3

    @pytest.mark.asyncio
    async def test_move_tab(self, app):
        async with app.run_test(size=(120, 40)) as pilot:
            app.action_new_terminal()
            app.action_move_tab(-1)
            await pilot.pause()
            assert [tab.id for tab in app.registry.list()] == [2, 1]


class TestShutdown:
    @pytest.mark.asyncio
    async def test_resources_released_on_exit(self):
        registry = SessionRegistry()
        handle = MagicMock()
        app = TabDeckApp(registry=registry, prefs=Preferences())
        async with app.run_test(size=(120, 40)):
            registry.create(TabKind.TERMINAL, resource=handle)
        handle.release.assert_called_once_with()
        assert len(registry) == 1
