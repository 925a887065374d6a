import time
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlparse

import httpx
import structlog

from .config import Config
from .errors import ErrorKind, FetchError

logger = structlog.get_logger(__name__)

DEFAULT_URL = "https://coderbyte.com/api/challenges/json/rest-get-simple"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


@dataclass(frozen=True)
class Endpoint:
    """Where to fetch from and how to present ourselves."""
    url: str = DEFAULT_URL
    user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def from_config(cls, config: Config) -> "Endpoint":
        endpoint = config.endpoint
        return cls(
            url=endpoint.get('url', DEFAULT_URL),
            user_agent=endpoint.get('user_agent', DEFAULT_USER_AGENT),
        )


def validate_url(url: str) -> str:
    """Check the endpoint URL is an absolute http(s) URL, raising UrlFormatError otherwise."""
    if not url or not isinstance(url, str):
        raise FetchError(ErrorKind.URL_FORMAT, f"Empty or invalid URL: {url!r}")

    parsed = urlparse(url)
    if parsed.scheme not in ['http', 'https']:
        raise FetchError(ErrorKind.URL_FORMAT, f"Invalid scheme: {parsed.scheme!r} in {url}")
    if not parsed.netloc:
        raise FetchError(ErrorKind.URL_FORMAT, f"Missing host in {url}")

    try:
        httpx.URL(url)
    except httpx.InvalidURL as e:
        raise FetchError(ErrorKind.URL_FORMAT, f"{e} ({url})") from e

    return url


class HobbyFetcher:
    """Blocking HTTP client for the hobbies endpoint. Use as a context manager."""

    def __init__(self, endpoint: Endpoint = None, transport: Optional[httpx.BaseTransport] = None):
        self.endpoint = endpoint or Endpoint()

        headers = {
            'User-Agent': self.endpoint.user_agent,
            'Accept': 'application/json',
        }
        self._client = httpx.Client(
            timeout=httpx.Timeout(None),
            follow_redirects=True,
            headers=headers,
            transport=transport,
        )

    def fetch(self) -> str:
        """GET the endpoint and return the whole body decoded as text."""
        url = validate_url(self.endpoint.url)
        logger.info("fetch_started", url=url)
        start_time = time.time()

        try:
            with self._client.stream("GET", url) as response:
                response.raise_for_status()
                response.read()
                body = response.text
        except httpx.HTTPStatusError as e:
            logger.warning("fetch_bad_status", url=url, status_code=e.response.status_code)
            raise FetchError(ErrorKind.NETWORK, f"HTTP {e.response.status_code} from {url}") from e
        except httpx.RequestError as e:
            logger.warning("fetch_request_error", url=url, error=str(e), error_type=type(e).__name__)
            raise FetchError(ErrorKind.NETWORK, f"{type(e).__name__}: {e}") from e

        logger.info("fetch_completed",
                    url=url,
                    status_code=response.status_code,
                    size=len(body),
                    fetch_time=round(time.time() - start_time, 3))
        return body

    def close(self):
        self._client.close()

    def __enter__(self) -> "HobbyFetcher":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
