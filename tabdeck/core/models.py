"""Records shared by the registry and its consumers."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from .kinds import TabKind


class ResourceHandle(Protocol):
    """Capability that tears down whatever live resource a tab owns."""

    def release(self) -> None: ...


class CallbackResource:
    """Adapt a plain callable (e.g. ``connection.disconnect``) to a handle."""

    def __init__(self, callback: Callable[[], None]) -> None:
        self._callback = callback

    def release(self) -> None:
        self._callback()

    def __repr__(self) -> str:
        return f"CallbackResource({self._callback!r})"


@dataclass(frozen=True)
class BoundTarget:
    """The remote host configuration a tab addresses."""

    id: int
    username: str = ""
    host: str = ""
    port: int = 22
    name: str = ""

    @property
    def display_name(self) -> str:
        """``name`` when set, otherwise ``user@host:port``."""
        if self.name and self.name.strip():
            return self.name.strip()
        return f"{self.username}@{self.host}:{self.port}"


@dataclass(frozen=True)
class Tab:
    """A single work surface.

    Records are immutable; the registry swaps in a new record on every
    in-place update and bumps ``revision`` so observers can tell.
    """

    id: int
    kind: TabKind
    title: str
    bound_target: BoundTarget | None = None
    resource: ResourceHandle | None = None
    initial_view: str | None = None
    revision: int = 0

    @property
    def display_title(self) -> str:
        return self.title or self.kind.value


class TeardownError(Exception):
    """One or more resource handles failed while the registry was closing.

    ``failures`` holds ``(tab_id, exception)`` pairs in removal order.
    """

    def __init__(self, failures: list[tuple[int, BaseException]]) -> None:
        self.failures = failures
        ids = ", ".join(str(tab_id) for tab_id, _exc in failures)
        super().__init__(f"{len(failures)} resource(s) failed to release (tabs: {ids})")
