"""Theme definitions for tabdeck.

Each preset is a Textual Theme controlling the base colors ($primary,
$panel, $accent, ...) used by the tab bar and pane styles.
"""

from textual.theme import Theme

TEXTUAL_THEMES: dict[str, Theme] = {
    "dark": Theme(
        name="tabdeck-dark",
        primary="#cc7700",
        secondary="#5599dd",
        accent="#445566",
        background="black",
        surface="#111111",
        panel="#1e1e21",
        success="#5599dd",
        warning="#aaaa00",
        error="#cc3333",
        dark=True,
    ),
    "light": Theme(
        name="tabdeck-light",
        primary="#cc6600",
        secondary="#4488aa",
        accent="#667788",
        background="#fafafa",
        surface="#f0f0f0",
        panel="#cccccc",
        success="#338855",
        warning="#aa8800",
        error="#cc3333",
        dark=False,
    ),
}


def get_theme(name: str) -> Theme:
    """Return the Textual theme for *name*, falling back to dark."""
    return TEXTUAL_THEMES.get(name, TEXTUAL_THEMES["dark"])
