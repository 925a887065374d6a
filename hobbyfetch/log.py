import logging
import sys

import structlog


def resolve_level(level) -> int:
    """Accept a level name ("debug", "INFO") or number (10, "10"); unknown values fall back to INFO."""
    if isinstance(level, int):
        return level
    text = str(level).strip()
    if text.isdigit():
        return int(text)
    resolved = logging.getLevelName(text.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(level="INFO"):
    """Route structlog through stdlib logging on stderr; stdout is reserved for the result line."""
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=resolve_level(level),
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer()
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
