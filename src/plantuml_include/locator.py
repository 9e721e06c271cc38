"""Locator resolution for PlantUML include directives.

A locator is resolved relative to the file that contains the directive, not
relative to the top-level document, so nested relative includes work. When
the includer was fetched from a URL, relative locators are URL-joined.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from urllib.parse import urljoin

URL_SCHEMES = ("http://", "https://")


class LocatorKind(Enum):
    """Where an include target lives."""

    LOCAL = "local"
    REMOTE = "remote"
    STDLIB = "stdlib"


@dataclass(frozen=True)
class ResolvedLocator:
    """A locator resolved against its includer.

    Attributes:
        kind: Local file, remote URL or standard library reference
        location: Normalized path, absolute URL or the <...> reference itself
    """

    kind: LocatorKind
    location: str

    @property
    def key(self) -> str:
        """Identity of the target, used for cycle and include_once checks."""
        if self.kind is LocatorKind.LOCAL:
            return os.path.normcase(os.path.realpath(self.location))
        return self.location


def is_url(locator: str) -> bool:
    """Check whether a locator uses a recognized URL scheme."""
    return locator.lower().startswith(URL_SCHEMES)


def resolve_locator(locator: str, includer: str | None) -> ResolvedLocator:
    """Resolve an include locator.

    Args:
        locator: The unescaped locator from the directive.
        includer: Location (path or URL) of the file containing the
                  directive, or None when unknown (the working directory
                  is used as base).

    Returns:
        The resolved locator.
    """
    if locator.startswith("<") and locator.endswith(">"):
        return ResolvedLocator(LocatorKind.STDLIB, locator)

    if is_url(locator):
        return ResolvedLocator(LocatorKind.REMOTE, locator)

    if includer is not None and is_url(includer):
        return ResolvedLocator(LocatorKind.REMOTE, urljoin(includer, locator))

    if os.path.isabs(locator):
        return ResolvedLocator(LocatorKind.LOCAL, os.path.normpath(locator))

    base_dir = os.path.dirname(includer) if includer else ""
    return ResolvedLocator(LocatorKind.LOCAL, os.path.normpath(os.path.join(base_dir, locator)))
