"""
Entrypoint: load config, init logging, fetch the hobbies endpoint,
format the response and print a single line.
"""

import sys
from typing import Optional

import httpx
import structlog
from dotenv import load_dotenv

from .config import Config
from .errors import FetchError
from .fetcher import Endpoint, HobbyFetcher
from .formatter import format_output
from .log import setup_logging
from .response import parse_response

logger = structlog.get_logger(__name__)


class RunResult:
    def __init__(self, output: Optional[str] = None, error: Optional[FetchError] = None):
        """Outcome of one run: either the computed output or the error that stopped it."""
        if (output is None) == (error is None):
            raise ValueError("RunResult needs exactly one of output or error")
        self.output = output
        self.error = error

    @property
    def success(self) -> bool:
        return self.error is None

    @property
    def text(self) -> str:
        """The line to print: the output, or the error description."""
        if self.success:
            return self.output
        return str(self.error)


def run(endpoint: Endpoint = None, transport: Optional[httpx.BaseTransport] = None) -> RunResult:
    """Fetch, parse and format once. Every stage failure comes back as a RunResult error."""
    try:
        with HobbyFetcher(endpoint, transport=transport) as fetcher:
            body = fetcher.fetch()
        response = parse_response(body)
        logger.info("response_parsed",
                    hobbies=len(response.hobbies),
                    has_token=response.has_token)
        return RunResult(output=format_output(response))
    except FetchError as e:
        logger.warning("run_failed", kind=e.kind.value, error=e.message)
        return RunResult(error=e)


def main() -> int:
    """Main entry point: always exits 0, errors are printed rather than raised."""
    load_dotenv()
    config = Config()
    setup_logging(config.logging.get('level', 'INFO'))

    result = run(Endpoint.from_config(config))
    print(result.text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
