# Copyright (c) 2025 Damien Boisvert (AlphaGameDeveloper)
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

from .loggingFormatters import MultiLineFormatter, GunicornWorkerFilter, LOG_FORMAT, LOG_DATE_FORMAT
from .timestamps import format_timestamp, parse_timestamp, display_date
