"""Resource readers used to fetch included files.

Readers are the boundary to the file system and the network. Each one maps
its own failure modes onto ReadStatus once, so the preprocessor never has to
inspect OSError or httpx exceptions:

- NOT_FOUND and UNREACHABLE mean "leave the directive for the rendering
  server", they are returned, not raised.
- Anything else (unreadable file, undecodable response) raises
  IncludeReadError.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

import httpx

from plantuml_include.errors import IncludeReadError

logger = logging.getLogger(__name__)

DEFAULT_REMOTE_TIMEOUT = 30.0


class ReadStatus(Enum):
    """Outcome of reading an include target."""

    OK = "ok"
    NOT_FOUND = "not_found"
    UNREACHABLE = "unreachable"


@dataclass(frozen=True)
class ReadResult:
    """Content of an include target, or the reason it is missing.

    Attributes:
        status: Whether the content was read
        content: The text content when status is OK, None otherwise
        reason: Human readable reason when the content is missing
    """

    status: ReadStatus
    content: str | None = None
    reason: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is ReadStatus.OK


class ResourceReader(Protocol):
    """Reads the text content behind a location."""

    def read(self, location: str) -> ReadResult: ...


class LocalFileReader:
    """Reads local files, keeping line endings as they are on disk."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def read(self, location: str) -> ReadResult:
        try:
            with open(location, encoding=self._encoding, newline="") as f:
                return ReadResult(ReadStatus.OK, content=f.read())
        except (FileNotFoundError, NotADirectoryError) as e:
            return ReadResult(ReadStatus.NOT_FOUND, reason=str(e))
        except (OSError, UnicodeDecodeError) as e:
            raise IncludeReadError(location, f"{type(e).__name__}: {e}") from e


class RemoteResourceReader:
    """Fetches remote files over HTTP(S) with httpx.

    Args:
        client: An httpx.Client to use. When None, a short-lived client is
                created for every request.
        timeout: Request timeout in seconds for the short-lived client.
    """

    def __init__(self, client: httpx.Client | None = None, timeout: float = DEFAULT_REMOTE_TIMEOUT) -> None:
        self._client = client
        self._timeout = timeout

    def read(self, location: str) -> ReadResult:
        if self._client is not None:
            return self._fetch(self._client, location)
        with httpx.Client(timeout=self._timeout, follow_redirects=True) as client:
            return self._fetch(client, location)

    def _fetch(self, client: httpx.Client, location: str) -> ReadResult:
        try:
            response = client.get(location)
        except httpx.DecodingError as e:
            raise IncludeReadError(location, f"Malformed response: {e}") from e
        except httpx.TimeoutException as e:
            logger.debug(f"Timeout fetching {location}: {e}")
            return ReadResult(ReadStatus.UNREACHABLE, reason="Request timeout")
        except httpx.RequestError as e:
            logger.debug(f"Request error fetching {location}: {e}")
            return ReadResult(ReadStatus.UNREACHABLE, reason=f"Request error: {e}")

        if response.status_code >= 400:
            return ReadResult(ReadStatus.UNREACHABLE, reason=f"HTTP {response.status_code}")

        return ReadResult(ReadStatus.OK, content=response.text)
