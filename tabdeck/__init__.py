"""tabdeck -- tab lifecycle and split-screen layout manager for multi-pane clients."""

__version__ = "0.1.0"
