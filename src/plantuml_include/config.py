"""Configuration for the PlantUML include preprocessor."""

from __future__ import annotations

from dataclasses import dataclass

from plantuml_include.readers import DEFAULT_REMOTE_TIMEOUT, ResourceReader


@dataclass
class PreprocessOptions:
    """Options of a preprocessing run.

    Attributes:
        source_path: Path or URL of the document being expanded. Relative
                     includes of the document resolve against its directory;
                     when None they resolve against the working directory.
        encoding: Encoding of local include files
        remote_timeout: Timeout in seconds for fetching remote includes
        local_reader: Reader for local files, LocalFileReader when None
        remote_reader: Reader for URLs, RemoteResourceReader when None
    """

    source_path: str | None = None
    encoding: str = "utf-8"
    remote_timeout: float = DEFAULT_REMOTE_TIMEOUT
    local_reader: ResourceReader | None = None
    remote_reader: ResourceReader | None = None
