"""Include Directive Parser for PlantUML sources.

This module provides the IncludeDirectiveParser class for recognizing PlantUML
include directives (!include, !include_once, !include_many, !includeurl and
!includesub) on scanned source lines.
"""

from __future__ import annotations

import re

from plantuml_include.include_directive import IncludeDirective
from plantuml_include.scanner import ScannedLine, scan_lines

# Regular expression pattern for PlantUML include directives
# Matches: !include path/to/file.iuml!SELECTOR # trailing comment
# The locator is a run of non-blank characters in which a space may appear escaped as "\ "
INCLUDE_PATTERN = re.compile(
    r"^[ \t]*!(?P<keyword>include_once|include_many|includeurl|includesub|include)[ \t]+"
    r"(?P<locator>(?:\\ |\S)+)(?P<trailing>.*)$"
)

ESCAPED_SPACE = "\\ "
SELECTOR_SEPARATOR = "!"


class IncludeDirectiveParser:
    """Parser for extracting PlantUML include directives from source lines.

    Only lines that start outside of a comment are considered, so directives
    inside ' line comments or /' ... '/ block comments are never matched.
    """

    def parse_line(self, scanned: ScannedLine) -> IncludeDirective | None:
        """Parse a single scanned line.

        Args:
            scanned: The line, as produced by scan_lines.

        Returns:
            The IncludeDirective found on the line, or None.
        """
        if not scanned.starts_in_code:
            return None

        match = INCLUDE_PATTERN.match(scanned.text)
        if match is None:
            return None

        raw_locator = match.group("locator")
        locator, selector = self._split_selector(raw_locator.replace(ESCAPED_SPACE, " "))

        return IncludeDirective(
            keyword=match.group("keyword"),  # type: ignore[arg-type]
            raw_locator=raw_locator,
            locator=locator,
            selector=selector,
            trailing=match.group("trailing"),
            line=scanned.index,
        )

    def extract_includes(self, content: str) -> list[IncludeDirective]:
        """Extract all include directives from a PlantUML source.

        Args:
            content: The diagram source to parse.

        Returns:
            A list of IncludeDirective objects in document order.
        """
        directives: list[IncludeDirective] = []
        for scanned in scan_lines(content):
            directive = self.parse_line(scanned)
            if directive is not None:
                directives.append(directive)
        return directives

    def _split_selector(self, locator: str) -> tuple[str, str | None]:
        """Split "file.puml!SELECTOR" into the path and the selector.

        Standard library references (<...>) are never split.

        Args:
            locator: The unescaped locator token.

        Returns:
            A tuple of (path, selector) where selector is None if absent.
        """
        if locator.startswith("<"):
            return locator, None

        path, separator, selector = locator.partition(SELECTOR_SEPARATOR)
        if not separator:
            return path, None

        # file.puml!!0 is accepted as an alternative spelling of file.puml!0
        selector = selector.lstrip(SELECTOR_SEPARATOR)
        return path, selector or None
