"""Sub-block extraction for included PlantUML files.

An include may select part of the target file:

- file.puml         the body of the first @startuml/@enduml block, or the
                    whole file when it has none
- file.puml!1       the body of the second @startuml block (0-indexed)
- file.puml!MY_ID   the bodies of all @startuml(id=MY_ID) blocks
- file.puml!NAME    with !includesub, the lines of all !startsub NAME sections
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from plantuml_include.errors import SelectorNotFoundError

# @startuml, @startuml(id=MY_ID), @startuml(id="MY_ID") on a line of their own
STARTUML_PATTERN = re.compile(r"^[ \t]*@startuml(?:\((?:id=)?[\"']?(?P<id>[^\"')]*)[\"']?\))?[ \t\r]*$")
ENDUML_PATTERN = re.compile(r"^[ \t]*@enduml[ \t\r]*$")
STARTSUB_PATTERN = re.compile(r"^[ \t]*!startsub[ \t]+(?P<name>\S+)[ \t\r]*$")
ENDSUB_PATTERN = re.compile(r"^[ \t]*!endsub[ \t\r]*$")
INDEX_PATTERN = re.compile(r"\d+", re.ASCII)


@dataclass
class DiagramBlock:
    """A @startuml ... @enduml block of a PlantUML file.

    Attributes:
        block_id: The id given as @startuml(id=...), None for anonymous blocks
        body: Lines between the start and end tags, joined with newlines
    """

    block_id: str | None
    body: str


def find_diagram_blocks(text: str) -> list[DiagramBlock]:
    """Find all complete @startuml ... @enduml blocks.

    An unterminated block at the end of the file is ignored.
    """
    blocks: list[DiagramBlock] = []
    lines = text.split("\n")
    start: int | None = None
    block_id: str | None = None

    for i, line in enumerate(lines):
        if start is None:
            match = STARTUML_PATTERN.match(line)
            if match:
                start = i
                block_id = match.group("id")
        elif ENDUML_PATTERN.match(line):
            blocks.append(DiagramBlock(block_id, "\n".join(lines[start + 1 : i])))
            start = None
            block_id = None

    return blocks


def find_sub_sections(text: str, name: str) -> list[str]:
    """Find the bodies of all !startsub NAME ... !endsub sections."""
    sections: list[str] = []
    collected: list[str] | None = None

    for line in text.split("\n"):
        if collected is None:
            match = STARTSUB_PATTERN.match(line)
            if match and match.group("name") == name:
                collected = []
        elif ENDSUB_PATTERN.match(line):
            sections.append("\n".join(collected))
            collected = None
        else:
            collected.append(line)

    return sections


def select_content(text: str, selector: str | None, location: str, sub_only: bool = False) -> str:
    """Apply a sub-selector to the content of an included file.

    Args:
        text: Content of the included file.
        selector: The selector after "!", or None.
        location: Resolved location of the file, for error messages.
        sub_only: Only look for !startsub sections (the !includesub form).

    Returns:
        The selected text.

    Raises:
        SelectorNotFoundError: If the selector matches nothing.
    """
    if selector is None:
        blocks = find_diagram_blocks(text)
        return blocks[0].body if blocks else text

    if sub_only:
        sections = find_sub_sections(text, selector)
    elif INDEX_PATTERN.fullmatch(selector):
        blocks = find_diagram_blocks(text)
        index = int(selector)
        sections = [blocks[index].body] if index < len(blocks) else []
    else:
        sections = [block.body for block in find_diagram_blocks(text) if block.block_id == selector]
        if not sections:
            sections = find_sub_sections(text, selector)

    if not sections:
        raise SelectorNotFoundError(location, selector)

    return "\n".join(sections)
