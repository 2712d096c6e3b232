"""
Logging Configuration

Structured logging with structlog. Configured once, on import, from
LOG_LEVEL and APP_ENV.

Log Output:
===========
Development:
    2024-01-15 10:30:00 [info     ] Request handled    request_id=9f1c... method=POST path=/posts status_code=201

Other environments (JSON):
    {"timestamp": "...", "level": "info", "event": "Author created", "request_id": "9f1c...", "author_id": 12}

Request Context:
================
Every line logged while a request is handled carries its request id,
method and path. The values live in contextvars, so concurrent requests
on the same event loop never see each other's context.

    with request_log_context(request_id, method="POST", path="/posts"):
        logger.info("Post created", post_id=post.id)
"""

import logging
import sys
import uuid
from contextlib import contextmanager
from typing import Any, Iterator

import structlog
from structlog.typing import Processor

from blog_api.config.settings import settings


def configure_logging(level: str, json_output: bool) -> None:
    """
    Configure structlog and the stdlib root logger.

    Args:
        level: Level name, e.g. "INFO"
        json_output: Render JSON lines instead of colored console output
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper()),
    )

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if json_output:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def new_request_id() -> str:
    """Random id for a request that arrived without one."""
    return uuid.uuid4().hex


@contextmanager
def request_log_context(request_id: str, **fields: Any) -> Iterator[None]:
    """
    Bind request_id and fields to every log call made inside the block.

    Context left over from a previous request on the same task is
    discarded on entry, and everything is cleared on exit.
    """
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(request_id=request_id, **fields)
    try:
        yield
    finally:
        structlog.contextvars.clear_contextvars()


configure_logging(settings.LOG_LEVEL, json_output=not settings.is_development)

logger: structlog.stdlib.BoundLogger = structlog.get_logger("blog_api")
