"""Name -> plotted-artist bookkeeping.

Handles live in one insertion-ordered dict. A handle's index is its 1-based
position in that order, so indices are always the dense sequence ``1..N`` and
deleting an entry shifts every later entry down by exactly one without any
renumbering pass.
"""

from __future__ import annotations

import logging
import numbers
from collections.abc import Iterator
from typing import Any

from .errors import DuplicateNameError, NotFoundError

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())

Key = str | int


class HandleRegistry:
    """Ordered registry of plotted artists keyed by unique names."""

    def __init__(self) -> None:
        self._handles: dict[str, Any] = {}

    def __len__(self) -> int:
        return len(self._handles)

    def __iter__(self) -> Iterator[str]:
        return iter(self._handles)

    def __contains__(self, key: object) -> bool:
        if isinstance(key, bool):
            return False
        if isinstance(key, numbers.Integral):
            return 1 <= key <= len(self._handles)
        return key in self._handles

    def __repr__(self) -> str:
        return f"HandleRegistry({list(self._handles)!r})"

    # Lookup -------------------------------------------------------------
    def _resolve(self, key: Key) -> str:
        """Map a name or 1-based index to a registered name."""
        if isinstance(key, bool):
            raise NotFoundError(key)
        if isinstance(key, numbers.Integral):
            if not 1 <= key <= len(self._handles):
                raise NotFoundError(key)
            return list(self._handles)[int(key) - 1]
        if key not in self._handles:
            raise NotFoundError(key)
        return key

    def get(self, key: Key) -> Any:
        """Return the handle registered under a name or 1-based index."""
        return self._handles[self._resolve(key)]

    def index_of(self, name: str) -> int:
        """Return the 1-based position of ``name``."""
        name = self._resolve(name)
        return list(self._handles).index(name) + 1

    def name_of(self, index: int) -> str:
        return self._resolve(index)

    def names(self) -> list[str]:
        return list(self._handles)

    def handles(self) -> list[Any]:
        return list(self._handles.values())

    def items(self) -> list[tuple[str, Any]]:
        return list(self._handles.items())

    # Mutation -----------------------------------------------------------
    def _auto_name(self) -> str:
        n = len(self._handles) + 1
        while str(n) in self._handles:
            n += 1
        return str(n)

    def add(self, handle: Any, name: str = "") -> str:
        """Register ``handle`` and return the name it was stored under.

        An empty ``name`` is replaced by the next free number, starting from
        ``len(self) + 1``.

        Raises
        ------
        DuplicateNameError
            If ``name`` is already registered.
        """
        if not name:
            name = self._auto_name()
        elif name in self._handles:
            raise DuplicateNameError(name)
        self._handles[name] = handle
        logger.debug("registered %r at index %d", name, len(self._handles))
        return name

    def delete(self, key: Key) -> Any:
        """Remove an entry and return its handle; later entries move up one."""
        name = self._resolve(key)
        handle = self._handles.pop(name)
        logger.debug("deleted %r, %d handles remain", name, len(self._handles))
        return handle

    def clear(self) -> None:
        self._handles.clear()
