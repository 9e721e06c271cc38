"""Include Directive data model for PlantUML include directives.

This module provides the IncludeDirective dataclass that represents PlantUML
include directives (!include, !include_once, !include_many, !includeurl and
!includesub) found in the code part of a diagram source line.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

IncludeKeyword = Literal["include", "include_once", "include_many", "includeurl", "includesub"]


@dataclass(frozen=True)
class IncludeDirective:
    """Represents a PlantUML include directive.

    Attributes:
        keyword: The directive keyword without the leading "!"
        raw_locator: The locator token exactly as written (escaped spaces, selector)
        locator: The path or URL with spaces unescaped and the selector removed
        selector: The sub-block id, index or name after "!", None if absent
        trailing: Verbatim text following the locator (comments, whitespace)
        line: Line number of the directive (0-indexed)
    """

    keyword: IncludeKeyword
    raw_locator: str
    locator: str
    selector: str | None
    trailing: str
    line: int

    @property
    def is_stdlib(self) -> bool:
        """Whether the locator is a standard library reference like <C4/C4_Container>."""
        return self.locator.startswith("<") and self.locator.endswith(">")
