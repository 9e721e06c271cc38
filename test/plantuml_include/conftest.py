"""Shared fixtures for the PlantUML include preprocessor tests.

The fixture tree is written into a temporary directory which becomes the
working directory, so tests can use relative locators such as
"fixtures/plantuml/style.iuml" and the normalized relative paths they
produce in error messages.
"""

from pathlib import Path

import pytest

GENERAL_STYLE = "skinparam monochrome true\nskinparam shadowing false"
NOTE_STYLE = "skinparam note {\n  BackgroundColor yellow\n}"
SEQUENCE_STYLE = "skinparam sequence {\n  ArrowColor red\n}"

FIXTURES = {
    "style-general.iuml": GENERAL_STYLE,
    "style-general.puml": f"@startuml\n{GENERAL_STYLE}\n@enduml\n",
    "style general with spaces.iuml": GENERAL_STYLE,
    "style-note.iuml": NOTE_STYLE,
    "style-sequence.iuml": SEQUENCE_STYLE,
    "style.iuml": "!include style-general.iuml\n!include style-note.iuml\n!include style-sequence.iuml",
    "style with spaces.iuml": (
        "!include style\\ general\\ with\\ spaces.iuml\n!include style-note.iuml\n!include style-sequence.iuml"
    ),
    "style-include-once-style-general.iuml": "!include_once style-general.iuml",
    "file-include-itself.iuml": "!include file-include-itself.iuml",
    "file-include-grand-parent.iuml": "!include file-include-parent.iuml",
    "file-include-parent.iuml": "!include file-include-grand-parent.iuml",
    "file-with-subs.puml": """@startuml
A -> A : stuff1
!startsub BASIC
B -> B : stuff2
B -> B : stuff2.1
!endsub
C -> C : stuff3
!startsub BASIC
D -> D : stuff4
D -> D : stuff4.1
!endsub
@enduml
""",
    "file-with-id.puml": """@startuml(id=MY_OWN_ID1)
A -> A : stuff1
B -> B : stuff2
@enduml

@startuml(id=MY_OWN_ID2)
C -> C : stuff3
D -> D : stuff4
@enduml
""",
    "file-with-index.puml": """@startuml
A -> A : stuff1
B -> B : stuff2
@enduml

@startuml
C -> C : stuff3
D -> D : stuff4
@enduml
""",
    "dir/base.iuml": 'skinparam Handwritten true\nskinparam DefaultFontName "Neucha"',
    "dir/subdir/handwritten.iuml": "!include ../base.iuml\nskinparam BackgroundColor black",
}

FIXTURES_DIR = "fixtures/plantuml"


@pytest.fixture
def plantuml_fixtures(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Write the fixture files and chdir next to them.

    Returns:
        The absolute path of the fixtures directory.
    """
    root = tmp_path / FIXTURES_DIR
    for name, content in FIXTURES.items():
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    return root
