"""
loguru setup for the booking service.

One stdout sink for every process; in DEBUG mode also an hourly rotated file
under `logs/` (or `TEST_LOG_DIR` under pytest). Driver and server loggers
that use stdlib `logging` (asyncpg, SQLAlchemy, granian) are routed here too.
"""

from contextvars import ContextVar
from datetime import datetime
from enum import StrEnum
import logging
import os
from pathlib import Path
import re
import sys
from typing import TYPE_CHECKING

from loguru import logger as loguru_logger


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from event_booking.platform.config.core_setting import settings
from event_booking.platform.constant.path import LOG_DIR
from event_booking.platform.logging.service_context import get_service_context


SENSITIVE_KEYWORDS = {
    'password',
    'POSTGRES_PASSWORD',
}
MAX_CONTENT_LENGTH = 500

chain_start_time_var: ContextVar[float] = ContextVar('chain_start_time_var', default=0)
call_depth_var: ContextVar[int] = ContextVar('call_depth_var', default=0)


class ExtraField(StrEnum):
    SERVICE_CONTEXT = 'service_context'
    CHAIN_START_TIME = 'chain_start_time'
    CALL_TARGET = 'call_target'


# granian access line: 127.0.0.1 - "POST /api/bookings HTTP/1.1" - 201 - 8ms
_ACCESS_LINE = re.compile(r'"[A-Z]+ \S+ HTTP/[\d.]+" - (?P<status>\d{3})\b')

# stdlib debug chatter that carries no request information
_MUTED_DEBUG_FRAGMENTS = ('Using selector:',)


def access_log_level(message: str) -> str | None:
    """Level for a granian access line, keyed on its HTTP status; None for other lines."""
    match = _ACCESS_LINE.search(message)
    if match is None:
        return None
    status = int(match.group('status'))
    if status >= 500:
        return 'ERROR'
    if status >= 400:
        return 'WARNING'
    return 'SUCCESS' if status >= 200 else 'INFO'


def _bind_defaults(base: 'LoguruLogger') -> 'LoguruLogger':
    # The format below reads every ExtraField, so each record needs all of them
    return base.bind(
        **{
            ExtraField.SERVICE_CONTEXT: get_service_context(),
            ExtraField.CHAIN_START_TIME: '',
            ExtraField.CALL_TARGET: '',
        }
    )


class InterceptHandler(logging.Handler):
    """Route stdlib logging records into loguru, keeping the original call site."""

    def __init__(self, target: 'LoguruLogger') -> None:
        super().__init__()
        self._target = target

    def emit(self, record: logging.LogRecord) -> None:
        message = record.getMessage()
        if record.levelno <= logging.DEBUG and any(
            fragment in message for fragment in _MUTED_DEBUG_FRAGMENTS
        ):
            return

        level: str | int | None = access_log_level(message)
        if level is None:
            try:
                level = loguru_logger.level(record.levelname).name
            except ValueError:
                level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore[assignment]
            depth += 1

        self._target.opt(depth=depth, exception=record.exc_info).log(level, message)


io_log_format = ' | '.join(
    (
        f'<c>{{extra[{ExtraField.SERVICE_CONTEXT}]}}</>',
        '<lvl>{level:<8}</>',
        f'<c>{{file}}::{{function}}:{{line}}</>=><y>{{extra[{ExtraField.CALL_TARGET}]}}</>',
        '{message}',
        '<lk>{elapsed}</>',
        f'<lk>{{extra[{ExtraField.CHAIN_START_TIME}]:<18}}</>',
    )
)


def _log_file_path() -> Path:
    test_log_dir = os.environ.get('TEST_LOG_DIR')
    hour = datetime.now().astimezone().strftime('%Y-%m-%d_%H')
    if test_log_dir:
        return Path(test_log_dir) / f'test_{hour}.log'
    return Path(LOG_DIR) / f'{hour}.log'


def configure_logging() -> 'LoguruLogger':
    level = 'DEBUG' if settings.DEBUG else 'INFO'
    bound = _bind_defaults(loguru_logger)

    loguru_logger.remove()
    bound.add(sys.stdout, format=io_log_format, level=level, enqueue=True)

    if settings.DEBUG:
        bound.add(
            str(_log_file_path()),
            format=io_log_format,
            level=level,
            rotation='1 hour',
            retention='7 days',
            compression='gz',
            enqueue=True,
        )

    logging.basicConfig(handlers=[InterceptHandler(bound)], level=0, force=True)
    return bound


custom_logger = configure_logging()
