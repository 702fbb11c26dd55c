"""Application-wide logging initialization

IMPORTANT: Call `initialize_logging()` once at process start-up (the
handler modules do it on import) before any other logging is done.

Logging format (one JSON object per line on stdout):
{
    "timestamp": "2026-10-19T12:00:00.000Z",
    "level": "INFO",
    "logger": "bref.lambdas.shorten_url.app",
    "message": "Shortened URL. Responding with 200.",
    "key": "1dFhvQ"
}

Fields passed through `extra=` are attached to the JSON object as-is.
When a record carries exception info, its formatted traceback is attached
under "exception".
"""

import os
import json
import logging
import logging.config
from datetime import datetime, UTC

from bref.utils.constants import LOG_LEVEL_ENV


class JsonFormatter(logging.Formatter):
    """JSON formatter that includes LogRecord extras"""

    STANDARD_ATTRS = frozenset(
        {
            'args',
            'asctime',
            'created',
            'exc_info',
            'exc_text',
            'filename',
            'funcName',
            'levelname',
            'levelno',
            'lineno',
            'message',
            'module',
            'msecs',
            'msg',
            'name',
            'pathname',
            'process',
            'processName',
            'relativeCreated',
            'stack_info',
            'thread',
            'threadName',
            'taskName',
        }
    )

    def format(self, record: logging.LogRecord) -> str:
        # fmt: off
        timestamp = datetime.fromtimestamp(record.created, tz=UTC) \
                            .isoformat(timespec="milliseconds") \
                            .replace("+00:00", "Z")
        # fmt: on

        log = {
            'timestamp': timestamp,
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }

        if record.exc_info:
            log['exception'] = self.formatException(record.exc_info)

        # Attach `extra` fields
        for key, value in record.__dict__.items():
            if key not in self.STANDARD_ATTRS:
                log[key] = value

        # default=str: extras may hold paths, keys or datetimes
        return json.dumps(log, default=str)


def initialize_logging(level: str | None = None) -> None:
    """Configure the root logger to emit JSON lines on stdout.

    Args:
        level (str | None):
            Log level name. Defaults to `LOG_LEVEL`, or 'INFO' if unset.
    """
    log_level = (level or os.getenv(LOG_LEVEL_ENV, 'INFO')).upper()
    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'json': {
                    '()': JsonFormatter,
                }
            },
            'handlers': {
                'stdout': {
                    'class': 'logging.StreamHandler',
                    'formatter': 'json',
                    'stream': 'ext://sys.stdout',
                }
            },
            'root': {
                'level': log_level,
                'handlers': ['stdout'],
            },
        }
    )
