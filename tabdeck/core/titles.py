"""Collision-free display titles.

``"Server A"`` is handed out as-is the first time, then ``"Server A (2)"``,
``"Server A (3)"`` and so on, always picking the smallest free number.
A desired title that already carries a ``" (N)"`` suffix is folded back
to its root first, so typing ``"Server A (2)"`` by hand lands in the same
bucket as ``"Server A"``.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

_SUFFIX_RE = re.compile(r"^(.*) \((\d+)\)$")


def split_suffix(title: str) -> tuple[str, int | None]:
    """Split ``"root (N)"`` into ``("root", N)``; plain titles give ``None``."""
    m = _SUFFIX_RE.match(title)
    if not m:
        return title, None
    return m.group(1), int(m.group(2))


def uniquify(
    desired: str | None,
    existing_titles: Iterable[str],
    *,
    default: str,
) -> str:
    """Return a title for a new or renamed tab that clashes with none of *existing_titles*.

    *existing_titles* should only contain the titles of tabs that take part
    in uniqueness; the tab being renamed must not be among them.
    """
    base = (desired or "").strip() or default.strip()
    root, _n = split_suffix(base)

    root_used = False
    used_numbers: set[int] = set()
    for title in existing_titles:
        if not title:
            continue
        if title == root:
            root_used = True
            continue
        other_root, n = split_suffix(title)
        if n is not None and other_root == root:
            used_numbers.add(n)

    if not root_used:
        return root
    n = 2
    while n in used_numbers:
        n += 1
    return f"{root} ({n})"
