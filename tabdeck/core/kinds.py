"""Tab kinds and the per-kind policies the registry consults.

Every policy is a table keyed by :class:`TabKind`.  Tables are checked for
full coverage at import time, so adding a kind without deciding each
policy fails loudly instead of silently falling through to a default.
"""

from __future__ import annotations

from enum import Enum


class TabKind(Enum):
    """Closed set of work surfaces a tab can show."""

    HOME = "home"
    TERMINAL = "terminal"
    REMOTE_STATS = "remote_stats"
    FILE_BROWSER = "file_browser"
    TUNNEL = "tunnel"
    CONTAINER = "container"
    ADMIN = "admin"
    SESSION_MANAGER = "session_manager"
    USER_PROFILE = "user_profile"
    TOPOLOGY_VIEW = "topology_view"


# ---------------------------------------------------------------------------
# Policy tables
# ---------------------------------------------------------------------------

DEFAULT_TITLES: dict[TabKind, str] = {
    TabKind.HOME: "Home",
    TabKind.TERMINAL: "Terminal",
    TabKind.REMOTE_STATS: "Server Stats",
    TabKind.FILE_BROWSER: "File Manager",
    TabKind.TUNNEL: "Tunnels",
    TabKind.CONTAINER: "Docker",
    TabKind.ADMIN: "Admin",
    TabKind.SESSION_MANAGER: "Host Manager",
    TabKind.USER_PROFILE: "User Profile",
    TabKind.TOPOLOGY_VIEW: "Network Topology",
}

# Single global surfaces: a second create() updates the existing tab.
_MERGE: dict[TabKind, bool] = {
    TabKind.HOME: True,
    TabKind.TERMINAL: False,
    TabKind.REMOTE_STATS: False,
    TabKind.FILE_BROWSER: False,
    TabKind.TUNNEL: False,
    TabKind.CONTAINER: False,
    TabKind.ADMIN: True,
    TabKind.SESSION_MANAGER: True,
    TabKind.USER_PROFILE: False,
    TabKind.TOPOLOGY_VIEW: False,
}

# Kinds whose titles must stay distinguishable from each other.
_UNIQUE_TITLE: dict[TabKind, bool] = {
    TabKind.HOME: False,
    TabKind.TERMINAL: True,
    TabKind.REMOTE_STATS: True,
    TabKind.FILE_BROWSER: True,
    TabKind.TUNNEL: True,
    TabKind.CONTAINER: True,
    TabKind.ADMIN: False,
    TabKind.SESSION_MANAGER: False,
    TabKind.USER_PROFILE: False,
    TabKind.TOPOLOGY_VIEW: False,
}

# Kinds that may hold a live connection and therefore a resource handle.
_OWNS_RESOURCE: dict[TabKind, bool] = {
    TabKind.HOME: False,
    TabKind.TERMINAL: True,
    TabKind.REMOTE_STATS: True,
    TabKind.FILE_BROWSER: True,
    TabKind.TUNNEL: True,
    TabKind.CONTAINER: True,
    TabKind.ADMIN: False,
    TabKind.SESSION_MANAGER: False,
    TabKind.USER_PROFILE: False,
    TabKind.TOPOLOGY_VIEW: False,
}

# Kinds whose title follows the bound host's display name.
_TITLE_FROM_TARGET: dict[TabKind, bool] = {
    TabKind.HOME: False,
    TabKind.TERMINAL: True,
    TabKind.REMOTE_STATS: True,
    TabKind.FILE_BROWSER: True,
    TabKind.TUNNEL: True,
    TabKind.CONTAINER: True,
    TabKind.ADMIN: False,
    TabKind.SESSION_MANAGER: False,
    TabKind.USER_PROFILE: False,
    TabKind.TOPOLOGY_VIEW: False,
}

_SPLITTABLE: dict[TabKind, bool] = {
    TabKind.HOME: False,
    TabKind.TERMINAL: True,
    TabKind.REMOTE_STATS: True,
    TabKind.FILE_BROWSER: True,
    TabKind.TUNNEL: False,
    TabKind.CONTAINER: False,
    TabKind.ADMIN: False,
    TabKind.SESSION_MANAGER: False,
    TabKind.USER_PROFILE: False,
    TabKind.TOPOLOGY_VIEW: False,
}

_CLOSABLE: dict[TabKind, bool] = {
    TabKind.HOME: False,
    TabKind.TERMINAL: True,
    TabKind.REMOTE_STATS: True,
    TabKind.FILE_BROWSER: True,
    TabKind.TUNNEL: True,
    TabKind.CONTAINER: True,
    TabKind.ADMIN: True,
    TabKind.SESSION_MANAGER: True,
    TabKind.USER_PROFILE: True,
    TabKind.TOPOLOGY_VIEW: True,
}

# Full-window surfaces that never share the screen with split panes.
_GLOBAL_SURFACE: dict[TabKind, bool] = {
    TabKind.HOME: True,
    TabKind.TERMINAL: False,
    TabKind.REMOTE_STATS: False,
    TabKind.FILE_BROWSER: False,
    TabKind.TUNNEL: False,
    TabKind.CONTAINER: False,
    TabKind.ADMIN: True,
    TabKind.SESSION_MANAGER: True,
    TabKind.USER_PROFILE: True,
    TabKind.TOPOLOGY_VIEW: False,
}


def _check_exhaustive(table: dict[TabKind, object], name: str) -> None:
    missing = [kind.value for kind in TabKind if kind not in table]
    if missing:
        raise RuntimeError(f"{name} has no entry for: {', '.join(missing)}")


for _name, _table in (
    ("DEFAULT_TITLES", DEFAULT_TITLES),
    ("_MERGE", _MERGE),
    ("_UNIQUE_TITLE", _UNIQUE_TITLE),
    ("_OWNS_RESOURCE", _OWNS_RESOURCE),
    ("_TITLE_FROM_TARGET", _TITLE_FROM_TARGET),
    ("_SPLITTABLE", _SPLITTABLE),
    ("_CLOSABLE", _CLOSABLE),
    ("_GLOBAL_SURFACE", _GLOBAL_SURFACE),
):
    _check_exhaustive(_table, _name)


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


def parse_kind(value: TabKind | str) -> TabKind:
    """Coerce *value* to a :class:`TabKind`.

    Accepts the enum itself or its string value (``"file_browser"``);
    hyphens are accepted in place of underscores.  Raises ``ValueError``
    for anything else.
    """
    if isinstance(value, TabKind):
        return value
    try:
        return TabKind(str(value).strip().lower().replace("-", "_"))
    except ValueError:
        raise ValueError(f"Unknown tab kind: {value!r}") from None


def is_merge_eligible(kind: TabKind) -> bool:
    return _MERGE[kind]


def needs_unique_title(kind: TabKind) -> bool:
    return _UNIQUE_TITLE[kind]


def owns_resource(kind: TabKind) -> bool:
    return _OWNS_RESOURCE[kind]


def title_from_target(kind: TabKind) -> bool:
    return _TITLE_FROM_TARGET[kind]


def is_splittable(kind: TabKind) -> bool:
    return _SPLITTABLE[kind]


def is_closable(kind: TabKind) -> bool:
    return _CLOSABLE[kind]


def is_global_surface(kind: TabKind) -> bool:
    return _GLOBAL_SURFACE[kind]
