"""User preferences for tabdeck.

Loads settings from ~/.tabdeck/preferences.yaml.
Falls back to sensible defaults if the file doesn't exist or is invalid.
Creates a default file on first run so users can discover and edit it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from .core.kinds import DEFAULT_TITLES, TabKind, parse_kind
from .core.split import MAX_SPLIT_PANES
from .log import logger

PREFS_PATH = Path.home() / ".tabdeck" / "preferences.yaml"

_DEFAULT_YAML = """\
# tabdeck preferences
# Delete this file to reset to defaults.

titles:
  # Default tab titles per kind (used when a tab is opened without a title)
  home: "Home"
  terminal: "Terminal"
  remote_stats: "Server Stats"
  file_browser: "File Manager"
  tunnel: "Tunnels"
  container: "Docker"
  admin: "Admin"
  session_manager: "Host Manager"
  user_profile: "User Profile"
  topology_view: "Network Topology"

split:
  max_panes: 4                   # 2-4 tabs side by side

display:
  show_tab_numbers: true         # prefix tab labels with their position
  theme: "dark"                  # dark | light
"""


@dataclass
class TitlePreferences:
    """Default titles for tabs opened without one."""

    defaults: dict[TabKind, str] = field(default_factory=lambda: dict(DEFAULT_TITLES))


@dataclass
class SplitPreferences:
    """Split-screen settings."""

    max_panes: int = MAX_SPLIT_PANES


@dataclass
class DisplayPreferences:
    """Display settings for the tab bar."""

    show_tab_numbers: bool = True
    theme: str = "dark"


@dataclass
class Preferences:
    """Top-level tabdeck preferences."""

    titles: TitlePreferences = field(default_factory=TitlePreferences)
    split: SplitPreferences = field(default_factory=SplitPreferences)
    display: DisplayPreferences = field(default_factory=DisplayPreferences)


def _clamp_panes(value: object) -> int:
    return max(2, min(int(value), MAX_SPLIT_PANES))


def load_preferences(path: Path | None = None) -> Preferences:
    """Load preferences from YAML file.

    Falls back to sensible defaults if the file doesn't exist or is invalid.
    Creates a default preferences file on first run.
    """
    path = path or PREFS_PATH
    prefs = Preferences()

    if path.exists():
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except (OSError, yaml.YAMLError):
            logger.debug("failed to read preferences from %s", path, exc_info=True)
            return prefs
        if not isinstance(data, dict):
            logger.debug("ignoring preferences file %s: not a mapping", path)
            return prefs

        if isinstance(data.get("titles"), dict):
            for key, value in data["titles"].items():
                try:
                    kind = parse_kind(key)
                except ValueError:
                    logger.debug("unknown tab kind %r in preferences", key)
                    continue
                if value is not None and str(value).strip():
                    prefs.titles.defaults[kind] = str(value).strip()
        if isinstance(data.get("split"), dict):
            sdata = data["split"]
            if "max_panes" in sdata:
                try:
                    prefs.split.max_panes = _clamp_panes(sdata["max_panes"])
                except (TypeError, ValueError):
                    logger.debug("invalid split.max_panes %r", sdata["max_panes"])
        if isinstance(data.get("display"), dict):
            ddata = data["display"]
            if "show_tab_numbers" in ddata:
                prefs.display.show_tab_numbers = bool(ddata["show_tab_numbers"])
            if "theme" in ddata and ddata["theme"]:
                prefs.display.theme = str(ddata["theme"])
    else:
        # Create default file for user to customize
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(_DEFAULT_YAML, encoding="utf-8")
        except OSError:
            logger.debug("could not write default preferences to %s", path, exc_info=True)

    return prefs
