"""structlog setup for branchdiff.

Events are routed through stdlib logging so each configured output
(stderr, stdout or a file) gets its own level and renderer. A CLI
invocation runs inside a request scope; its id is stamped on every event
and on JSON error payloads so the two can be matched up.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from pathlib import Path
from typing import TYPE_CHECKING, Any
from uuid import uuid4

import structlog

if TYPE_CHECKING:
    from structlog.types import EventDict, Processor, WrappedLogger

    from branchdiff.config.models import LoggingConfig, LogOutputConfig

_request_id: ContextVar[str | None] = ContextVar("branchdiff_request_id", default=None)


def current_request_id() -> str | None:
    return _request_id.get()


@contextmanager
def request_scope(request_id: str | None = None) -> Iterator[str]:
    """Bind a correlation id until the block exits, then restore the previous one."""
    rid = request_id or uuid4().hex[:12]
    token = _request_id.set(rid)
    try:
        yield rid
    finally:
        _request_id.reset(token)


def _stamp_request_id(_logger: WrappedLogger, _method: str, event_dict: EventDict) -> EventDict:
    rid = _request_id.get()
    if rid is not None:
        event_dict.setdefault("request_id", rid)
    return event_dict


def _level_number(name: str) -> int:
    return logging.getLevelNamesMapping()[name.upper()]


def _pre_chain() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", key="timestamp"),
        _stamp_request_id,
    ]


def _formatter(output: LogOutputConfig, pre_chain: list[Processor]) -> logging.Formatter:
    renderer: Processor
    if output.format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        stream = sys.stdout if output.destination == "stdout" else sys.stderr
        tty = output.destination in ("stderr", "stdout") and stream.isatty()
        renderer = structlog.dev.ConsoleRenderer(colors=tty, pad_event_to=0)
    return structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=pre_chain,
    )


def _handler(destination: str) -> logging.Handler:
    if destination == "stderr":
        return logging.StreamHandler(sys.stderr)
    if destination == "stdout":
        return logging.StreamHandler(sys.stdout)
    path = Path(destination)
    path.parent.mkdir(parents=True, exist_ok=True)
    return logging.FileHandler(path, mode="a", encoding="utf-8")


def configure_logging(config: LoggingConfig | None = None, *, level: str | None = None) -> None:
    """Install one handler per configured output on the root logger.

    ``level`` replaces the configured root level (the CLI's ``-v``). Outputs
    without a level of their own follow the root level. Calling this again
    closes and replaces the previous handlers.
    """
    from branchdiff.config.models import LoggingConfig

    config = config or LoggingConfig()
    if level is not None:
        config = config.model_copy(update={"level": level})
    root_level = _level_number(config.level)
    pre_chain = _pre_chain()

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.make_filtering_bound_logger(root_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    for old in root.handlers[:]:
        root.removeHandler(old)
        old.close()
    root.setLevel(root_level)

    for output in config.outputs:
        handler = _handler(output.destination)
        handler.setLevel(_level_number(output.level or config.level))
        handler.setFormatter(_formatter(output, pre_chain))
        root.addHandler(handler)


def get_logger(name: str | None = None) -> Any:
    logger = structlog.get_logger()
    return logger.bind(logger=name) if name else logger
