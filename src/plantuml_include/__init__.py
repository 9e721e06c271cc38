"""PlantUML include preprocessor package.

This package expands !include directives of PlantUML diagram sources so they
can be rendered by a remote server such as Kroki.
"""

from plantuml_include.config import PreprocessOptions
from plantuml_include.errors import (
    IncludeCycleError,
    IncludeOnceError,
    IncludeReadError,
    PlantUMLIncludeError,
    SelectorNotFoundError,
)
from plantuml_include.preprocessor import PlantUMLPreprocessor, expand, strip_plantuml_tags

__all__ = [
    "IncludeCycleError",
    "IncludeOnceError",
    "IncludeReadError",
    "PlantUMLIncludeError",
    "PlantUMLPreprocessor",
    "PreprocessOptions",
    "SelectorNotFoundError",
    "expand",
    "strip_plantuml_tags",
]
