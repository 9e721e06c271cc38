"""Include Context for tracking includes during one expansion.

This module provides the IncludeContext class, the state threaded through a
single top-level expansion: the chain of files currently being expanded and
the set of files pulled in with !include_once. A new context is created for
every top-level call, nothing is shared between calls.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from plantuml_include.errors import IncludeCycleError, IncludeOnceError
from plantuml_include.locator import ResolvedLocator

logger = logging.getLogger(__name__)


class IncludeContext:
    """Ancestor stack and once-guard set of an expansion.

    The ancestor stack only holds the active inclusion path (a file is popped
    once it has been expanded), so including the same file twice side by
    side is fine while a file including one of its ancestors is a cycle.
    The once-guard set is cumulative for the whole run.
    """

    def __init__(self, root: ResolvedLocator | None = None) -> None:
        """Initialize an empty context.

        Args:
            root: Location of the top-level document, if known. It becomes
                  the bottom of the ancestor stack.
        """
        # Keys of the files being expanded, outermost first
        self._ancestors: list[str] = [root.key] if root is not None else []

        # Keys of files included with !include_once
        self._once_guard: set[str] = set()

    @property
    def depth(self) -> int:
        """Number of files on the active inclusion path."""
        return len(self._ancestors)

    def is_ancestor(self, target: ResolvedLocator) -> bool:
        """Check whether a target is currently being expanded."""
        return target.key in self._ancestors

    @contextmanager
    def descend(self, target: ResolvedLocator) -> Iterator[None]:
        """Push a target onto the ancestor stack for the duration of its expansion.

        Raises:
            IncludeCycleError: If the target is already on the stack.
        """
        if self.is_ancestor(target):
            logger.warning(f"Circular include detected involving: {target.location}")
            raise IncludeCycleError(target.location)

        self._ancestors.append(target.key)
        try:
            yield
        finally:
            self._ancestors.pop()

    def guard_once(self, target: ResolvedLocator) -> None:
        """Record an !include_once target.

        Raises:
            IncludeOnceError: If the target was already included with !include_once.
        """
        if target.key in self._once_guard:
            raise IncludeOnceError(target.location)
        self._once_guard.add(target.key)
