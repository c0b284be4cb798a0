"""HTTP transport used to pull artifact files from a remote repository."""

from __future__ import annotations

import logging
import time
from typing import Optional, Tuple

import httpx

from jarfetch.modules.artifacts.domain import Coordinate
from jarfetch.modules.artifacts.exceptions import NetworkError
from jarfetch.settings import Settings


class HttpArtifactFetcher:
    """Blocking GET of artifact files into memory."""

    def __init__(
        self,
        client: Optional[httpx.Client] = None,
        *,
        auth: Optional[Tuple[str, str]] = None,
        timeout: float = 30.0,
        verify: bool = True,
    ) -> None:
        self.log = logging.getLogger(self.__class__.__name__)
        self._auth = auth
        self._client = client or httpx.Client(timeout=timeout, verify=verify, follow_redirects=True)

    @classmethod
    def from_settings(cls, settings: Settings, client: Optional[httpx.Client] = None) -> "HttpArtifactFetcher":
        auth = None
        if settings.remote_username and settings.remote_password:
            auth = (settings.remote_username, settings.remote_password)
        return cls(client, auth=auth, timeout=settings.http_timeout, verify=settings.http_verify)

    def fetch(self, url: str, coordinate: Optional[Coordinate] = None) -> bytes:
        self.log.debug("GET %s", url)
        start_time = time.time()
        buffer = bytearray()
        try:
            with self._client.stream("GET", url, auth=self._auth) as response:
                response.raise_for_status()
                for chunk in response.iter_bytes(65536):
                    buffer.extend(chunk)
        except httpx.HTTPStatusError as exc:
            raise NetworkError(
                f"GET {url} answered {exc.response.status_code}",
                url,
                coordinate,
                status_code=exc.response.status_code,
            ) from exc
        except (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError) as exc:
            raise NetworkError(f"GET {url} failed: {exc}", url, coordinate) from exc
        elapsed = max(time.time() - start_time, 1e-3)
        self.log.debug("Fetched %s (%d bytes, %.2fs)", url, len(buffer), elapsed)
        return bytes(buffer)

    def close(self) -> None:
        self._client.close()
