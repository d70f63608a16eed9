from logging import WARNING, StreamHandler, getLogger

from structlog import configure
from structlog.contextvars import merge_contextvars
from structlog.dev import ConsoleRenderer
from structlog.processors import (
    JSONRenderer,
    StackInfoRenderer,
    TimeStamper,
    add_log_level,
    format_exc_info,
)
from structlog.stdlib import LoggerFactory, ProcessorFormatter

__all__ = ["setup_logging"]

# Run for structlog events and, as the pre-chain, for plain stdlib records
# (uvicorn, httpx) so both end up with the same keys.
SHARED_PROCESSORS = [
    merge_contextvars,
    add_log_level,
    StackInfoRenderer(),
    TimeStamper(fmt="iso"),
]


def build_formatter(environment: str) -> ProcessorFormatter:
    """Console lines in DEV, one JSON object per line everywhere else."""
    if environment == "DEV":
        renderers = [ConsoleRenderer()]
    else:
        renderers = [format_exc_info, JSONRenderer(ensure_ascii=False)]
    return ProcessorFormatter(
        foreign_pre_chain=SHARED_PROCESSORS,
        processors=[ProcessorFormatter.remove_processors_meta, *renderers],
    )


def setup_logging(config, *args, **kwargs):
    configure(
        processors=[*SHARED_PROCESSORS, ProcessorFormatter.wrap_for_formatter],
        logger_factory=LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = StreamHandler()
    handler.setFormatter(build_formatter(config.ENVIRONMENT))

    root = getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(config.LOG_LEVEL.upper())

    # Request lines come from LoggingMiddleware and the proxy service.
    for name in ("uvicorn.access", "httpx", "httpcore"):
        getLogger(name).setLevel(max(WARNING, root.level))
