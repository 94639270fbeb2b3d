# Cloudimg Cloud Image Registry Client
# Copyright (C) 2019  Rainlab Inc & Creationline, Inc & Beiran Contributors
#
# Rainlab Inc. https://rainlab.co.jp
# Creationline, Inc. https://creationline.com">
# Beiran Contributors https://docs.beiran.io/contributors.html
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

""" Logging package for cloudimg """

import sys
import logging

from typing import IO, List, Union # pylint: disable=unused-import

LOG_FORMAT = '[%(asctime)s] [%(name)s] %(levelname)s - %(message)s'


def build_logger(filename: str = None, log_level: Union[int, str] = logging.ERROR,
                 stream: IO = None) -> logging.Logger:
    """
    Build package logger writing to stdout and optionally to a file.

    Handlers of a previous call are replaced, so the logger can be
    rebuilt after config is reloaded.

    Args:
        filename (str): log file path (optional)
        log_level (int, str): level number or name
        stream: stream to write to instead of stdout (optional)

    Returns:
        logging.Logger: `cloudimg` logger

    """
    logger = logging.getLogger(__package__)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers = [logging.StreamHandler(stream or sys.stdout)]  # type: List[logging.Handler]
    if filename:
        handlers.append(logging.FileHandler(filename=filename))

    formatter = logging.Formatter(LOG_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(log_level)
    return logger
