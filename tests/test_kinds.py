"""Tests for tabdeck.core.kinds -- kind parsing and per-kind policy."""

from __future__ import annotations

import pytest

from tabdeck.core import kinds
from tabdeck.core.kinds import TabKind, parse_kind


class TestParseKind:
    def test_enum_passthrough(self):
        assert parse_kind(TabKind.TUNNEL) is TabKind.TUNNEL

    def test_string_value(self):
        assert parse_kind("file_browser") is TabKind.FILE_BROWSER

    def test_hyphenated_and_case_insensitive(self):
        assert parse_kind("Session-Manager") is TabKind.SESSION_MANAGER

    def test_unknown_kind_raises(self):
        with pytest.raises(ValueError, match="Unknown tab kind"):
            parse_kind("spreadsheet")


class TestPolicies:
    def test_merge_eligible_kinds(self):
        merged = {k for k in TabKind if kinds.is_merge_eligible(k)}
        assert merged == {TabKind.HOME, TabKind.ADMIN, TabKind.SESSION_MANAGER}

    def test_unique_title_kinds(self):
        unique = {k for k in TabKind if kinds.needs_unique_title(k)}
        assert unique == {
            TabKind.TERMINAL,
            TabKind.REMOTE_STATS,
            TabKind.FILE_BROWSER,
            TabKind.TUNNEL,
            TabKind.CONTAINER,
        }

    def test_merge_and_unique_are_disjoint(self):
        for kind in TabKind:
            assert not (kinds.is_merge_eligible(kind) and kinds.needs_unique_title(kind))

    def test_home_is_not_closable(self):
        assert kinds.is_closable(TabKind.HOME) is False
        assert all(kinds.is_closable(k) for k in TabKind if k is not TabKind.HOME)

    def test_every_kind_has_a_default_title(self):
        for kind in TabKind:
            assert kinds.DEFAULT_TITLES[kind]

    def test_missing_policy_entry_detected(self):
        table = {k: True for k in TabKind if k is not TabKind.TUNNEL}
        with pytest.raises(RuntimeError, match="tunnel"):
            kinds._check_exhaustive(table, "table")
