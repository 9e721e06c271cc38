"""Exceptions raised while expanding PlantUML include directives.

Unresolvable includes (missing local file, unreachable URL, standard library
reference) are not errors: the directive is left in place so the rendering
server can resolve it. Everything below aborts the whole expansion.
"""

from __future__ import annotations

ERROR_PREFIX = "Preprocessing of PlantUML include failed"


class PlantUMLIncludeError(Exception):
    """Base class for fatal include errors.

    Attributes:
        locator: The resolved location of the include that failed.
    """

    def __init__(self, message: str, locator: str) -> None:
        super().__init__(message)
        self.locator = locator


class IncludeCycleError(PlantUMLIncludeError):
    """A file includes itself, directly or through one of its includers."""

    def __init__(self, locator: str) -> None:
        super().__init__(
            f"{ERROR_PREFIX}, because recursive reading already included referenced file '{locator}'",
            locator,
        )


class IncludeOnceError(PlantUMLIncludeError):
    """A file guarded by !include_once is included once more with !include_once."""

    def __init__(self, locator: str) -> None:
        super().__init__(
            f"{ERROR_PREFIX}, because including multiple times referenced file '{locator}' with '!include_once' guard",
            locator,
        )


class SelectorNotFoundError(PlantUMLIncludeError):
    """The requested id, index or sub-block does not exist in the included file."""

    def __init__(self, locator: str, selector: str) -> None:
        super().__init__(
            f"{ERROR_PREFIX}, because the referenced file '{locator}' has no block matching '!{selector}'",
            locator,
        )
        self.selector = selector


class IncludeReadError(PlantUMLIncludeError):
    """An included resource exists but could not be read."""

    def __init__(self, locator: str, reason: str) -> None:
        super().__init__(
            f"{ERROR_PREFIX}, because reading the referenced file '{locator}' caused an error:\n{reason}",
            locator,
        )
