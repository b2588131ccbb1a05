"""Shared helpers for Tourney Scheduler: logging setup and id generation."""

# Tourney Scheduler
# Copyright (C) 2025  Tourney Scheduler developers
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

import logging
import os
import sys
import uuid

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_LEVEL_ENV = "TOURNEY_SCHEDULER_LOG_LEVEL"
ROOT_LOGGER_NAME = "tourneyscheduler"


def _configure_root_logger() -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if root.handlers:
        return root

    level_name = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    root.addHandler(handler)
    root.setLevel(level)
    return root


def setup_logger(name: str) -> logging.Logger:
    """Get a logger for a module of this package.

    The package root logger gets a single stream handler the first time
    this is called. Its level comes from the ``TOURNEY_SCHEDULER_LOG_LEVEL``
    environment variable (default ``INFO``).

    Args:
        name: Module name (usually ``__name__``)

    Returns:
        Logger instance
    """
    _configure_root_logger()
    return logging.getLogger(name)


def generate_id(prefix: str = "") -> str:
    """Generate a unique identifier, optionally prefixed (e.g. ``team_1f2e...``)."""
    unique = uuid.uuid4().hex[:12]
    if prefix:
        return f"{prefix.lower()}_{unique}"
    return unique
