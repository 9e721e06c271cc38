"""PlantUML include preprocessor.

Expands include directives of a PlantUML diagram source before it is sent to
the rendering server, which cannot see the files next to the document:

    !include style.iuml             the file, or its first @startuml block
    !include_many style.iuml        same as !include
    !include_once style.iuml        fails if already included with !include_once
    !includeurl https://host/f.iuml !include restricted to URLs
    !include diagrams.puml!1        second @startuml block
    !include diagrams.puml!MY_ID    @startuml(id=MY_ID) blocks
    !includesub parts.puml!BASIC    !startsub BASIC ... !endsub sections

Included content is expanded recursively, relative to the file it comes
from. Directives the preprocessor cannot satisfy (standard library
references, missing files, unreachable URLs) are kept as they are so the
rendering server gets a chance to resolve them. Finally the @startuml and
@enduml tags are removed from the assembled text.
"""

from __future__ import annotations

import logging
import re

from plantuml_include.config import PreprocessOptions
from plantuml_include.include_context import IncludeContext
from plantuml_include.include_directive import IncludeDirective
from plantuml_include.include_directive_parser import IncludeDirectiveParser
from plantuml_include.locator import LocatorKind, ResolvedLocator, resolve_locator
from plantuml_include.readers import LocalFileReader, RemoteResourceReader, ResourceReader
from plantuml_include.scanner import scan_lines
from plantuml_include.sub_blocks import select_content

logger = logging.getLogger(__name__)

# A @startuml, @startuml(id=...) or @enduml line
PLANTUML_TAG_PATTERN = re.compile(r"^[ \t]*@(?:startuml(?:\([^)]*\))?|enduml)[ \t\r]*$")


def strip_plantuml_tags(text: str) -> str:
    """Remove @startuml and @enduml lines from a diagram source.

    Blank lines right before a tag line are removed with it, so that
    concatenated diagrams collapse into their bodies.

    Args:
        text: The expanded diagram source.

    Returns:
        The text with every tag line removed.
    """
    kept: list[str] = []
    for line in text.split("\n"):
        if PLANTUML_TAG_PATTERN.match(line):
            while kept and not kept[-1].strip():
                kept.pop()
            continue
        kept.append(line)
    return "\n".join(kept)


class PlantUMLPreprocessor:
    """Expands PlantUML include directives.

    The preprocessor holds configuration only; all state of an expansion
    lives in an IncludeContext created by expand(), so one instance can be
    used for any number of documents.
    """

    def __init__(self, options: PreprocessOptions | None = None) -> None:
        self._options = options or PreprocessOptions()
        self._parser = IncludeDirectiveParser()
        self._local_reader: ResourceReader = self._options.local_reader or LocalFileReader(self._options.encoding)
        self._remote_reader: ResourceReader = self._options.remote_reader or RemoteResourceReader(
            timeout=self._options.remote_timeout
        )

    def expand(self, text: str) -> str:
        """Expand all include directives of a document and strip its tags.

        Args:
            text: The diagram source.

        Returns:
            The fully expanded source without @startuml/@enduml lines.

        Raises:
            PlantUMLIncludeError: On an include cycle, an !include_once
                                  violation, an unknown sub-selector or an
                                  unreadable file.
        """
        source_path = self._options.source_path
        root = resolve_locator(source_path, None) if source_path else None
        context = IncludeContext(root)

        expanded = self._expand(text, root.location if root else None, context)
        return strip_plantuml_tags(expanded)

    def _expand(self, text: str, includer: str | None, context: IncludeContext) -> str:
        """Replace the directive lines of one text, recursing into included content.

        Args:
            text: Text to expand.
            includer: Location the text was read from, None for an anonymous document.
            context: State of the current top-level expansion.

        Returns:
            The expanded text.
        """
        lines: list[str] = []
        for scanned in scan_lines(text):
            directive = self._parser.parse_line(scanned)
            if directive is None:
                lines.append(scanned.text)
                continue

            replacement = self._include(directive, includer, context)
            if replacement is None:
                lines.append(scanned.text)
            else:
                lines.append(replacement + directive.trailing)

        return "\n".join(lines)

    def _include(self, directive: IncludeDirective, includer: str | None, context: IncludeContext) -> str | None:
        """Resolve, read and expand the target of a directive.

        Returns:
            The expanded content, or None if the directive is to be kept as is.
        """
        target = resolve_locator(directive.locator, includer)

        if target.kind is LocatorKind.STDLIB:
            logger.warning(f"Skipping standard library include {target.location}, left to the rendering server")
            return None

        if directive.keyword == "includeurl" and target.kind is not LocatorKind.REMOTE:
            logger.warning(f"Skipping !includeurl of non URL locator {target.location}")
            return None

        content = self._read(target)
        if content is None:
            return None

        with context.descend(target):
            if directive.keyword == "include_once":
                context.guard_once(target)

            selected = select_content(
                content,
                directive.selector,
                target.location,
                sub_only=directive.keyword == "includesub",
            )
            logger.debug(f"Including {target.location} (depth {context.depth})")
            return self._expand(selected, target.location, context)

    def _read(self, target: ResolvedLocator) -> str | None:
        """Read an include target, None when it is to be left to the rendering server."""
        reader = self._remote_reader if target.kind is LocatorKind.REMOTE else self._local_reader
        result = reader.read(target.location)
        if not result.ok:
            logger.warning(
                f"Skipping include of {target.location} ({result.reason}), it can perhaps be found by the rendering server"
            )
            return None
        return result.content


def expand(text: str, options: PreprocessOptions | None = None) -> str:
    """Expand the include directives of a PlantUML source.

    Convenience wrapper around PlantUMLPreprocessor(options).expand(text).
    """
    return PlantUMLPreprocessor(options).expand(text)
