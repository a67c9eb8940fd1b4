"""Structured logging for ownerscope commands.

structlog events are rendered by stdlib ``logging`` handlers, one per
configured output, so one run can write readable lines to stderr and JSON to
a file at a different level. Every event carries the logger name and the run
id of the CLI invocation that produced it. Console handlers stay quiet while
a spinner owns the terminal.
"""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from pathlib import Path
from typing import TYPE_CHECKING, Any
from uuid import uuid4

import structlog

from ownerscope.core.progress import is_console_suppressed

if TYPE_CHECKING:
    from ownerscope.config.models import LoggingConfig, LogOutputConfig

_run_id: ContextVar[str | None] = ContextVar("run_id", default=None)


def get_run_id() -> str | None:
    return _run_id.get()


def set_run_id(run_id: str | None = None) -> str:
    """Set the run id for this invocation, generating one when not given."""
    rid = run_id or uuid4().hex[:12]
    _run_id.set(rid)
    return rid


def clear_run_id() -> None:
    _run_id.set(None)


def _stamp_run_id(
    _logger: structlog.types.WrappedLogger,
    _method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    rid = get_run_id()
    if rid is not None:
        event_dict["run_id"] = rid
    return event_dict


class _SpinnerGate(logging.Filter):
    """Drops console records while a spinner is on screen."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: ARG002
        return not is_console_suppressed()


def _level(name: str) -> int:
    return logging.getLevelNamesMapping()[name.upper()]


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", key="timestamp"),
        _stamp_run_id,  # type: ignore[list-item]
    ]


def _build_handler(
    output: LogOutputConfig,
    level: int,
    pre_chain: list[structlog.types.Processor],
) -> logging.Handler:
    handler: logging.Handler
    if output.destination in ("stderr", "stdout"):
        stream = sys.stderr if output.destination == "stderr" else sys.stdout
        handler = logging.StreamHandler(stream)
        handler.addFilter(_SpinnerGate())
        colors = stream.isatty()
    else:
        path = Path(output.destination)
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, mode="a", encoding="utf-8")
        colors = False

    renderer: structlog.types.Processor
    if output.format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=colors, pad_event_to=0, pad_level=False)

    handler.setLevel(level)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(processor=renderer, foreign_pre_chain=pre_chain)
    )
    return handler


def configure_logging(*, config: LoggingConfig | None = None, level: str = "WARNING") -> None:
    """Route structlog events through one stdlib handler per configured output.

    Without ``config``, logs at ``level`` to stderr in console format.
    Calling again replaces the handlers installed by the previous call.
    """
    from ownerscope.config.models import LoggingConfig

    if config is None:
        config = LoggingConfig(level=level)  # type: ignore[arg-type]

    root_level = _level(config.level)
    pre_chain = _shared_processors()
    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.make_filtering_bound_logger(root_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Uncached so module-level loggers follow reconfiguration
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(root_level)
    for output in config.outputs:
        output_level = _level(output.level or config.level)
        root.addHandler(_build_handler(output, output_level, pre_chain))


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    # The name goes to the logger factory; add_logger_name renders it
    if name:
        return structlog.get_logger(name)  # type: ignore[no-any-return]
    return structlog.get_logger()  # type: ignore[no-any-return]
