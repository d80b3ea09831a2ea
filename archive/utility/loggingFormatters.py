# Copyright (c) 2025 Damien Boisvert (AlphaGameDeveloper)
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

import logging
from os import getenv, getpid

LOG_FORMAT = "[%(worker_id)s] %(asctime)-21s %(levelname)-8s %(name)-12s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

class MultiLineFormatter(logging.Formatter):
    """Formatter that repeats the log prefix on every line of a message.

    Tracebacks and multi-line messages (the startup banner, for example)
    otherwise lose their timestamp and logger name after the first line,
    which makes interleaved gunicorn worker output unreadable.
    """
    def format(self, record):
        formatted = super().format(record)
        message = record.getMessage()
        if "\n" not in formatted:
            return formatted

        first_line = formatted.split("\n", 1)[0]
        first_message_line = message.split("\n", 1)[0]
        cut = first_line.rfind(first_message_line) if first_message_line else len(first_line)
        prefix = first_line[:cut] if cut >= 0 else ""

        return "\n".join(
            line if index == 0 else prefix + line
            for index, line in enumerate(formatted.split("\n"))
        )

class GunicornWorkerFilter(logging.Filter):
    """Filter to add the Gunicorn worker ID to log records."""

    def filter(self, record):
        worker_id = getenv("GUNICORN_WORKER_ID")
        record.worker_id = f"worker{worker_id}" if worker_id else f"PID {getpid()}"
        return True
