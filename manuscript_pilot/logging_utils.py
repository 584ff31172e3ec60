# Copyright 2026 Chisom Ubabukoh
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from __future__ import annotations

import datetime
import logging
import os
from pathlib import Path
from typing import Optional

from manuscript_pilot.config import get_settings


def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """Return a logger with a consistent formatter."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger


def set_level(level: int) -> None:
    """Adjust the level of every manuscript_pilot logger."""
    for name, logger in logging.Logger.manager.loggerDict.items():
        if name.startswith("manuscript_pilot") and isinstance(logger, logging.Logger):
            logger.setLevel(level)


LOGGER = get_logger("manuscript_pilot.analytics")


def log_event(event_type: str, details: str = "", path: Optional[Path] = None) -> None:
    """Logs a usage event to the analytics CSV file and the console."""
    timestamp = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    # Clean details to avoid CSV issues
    details = str(details).replace(",", ";").replace("\n", " ")

    LOGGER.info("[ANALYTICS] %s | %s | %s", timestamp, event_type, details)

    target = Path(path) if path is not None else get_settings().analytics_file
    file_exists = target.is_file()
    try:
        with open(target, "a", encoding="utf-8") as f:
            if not file_exists:
                f.write("timestamp,event_type,details\n")
            f.write(f"{timestamp},{event_type},{details}\n")
            f.flush()
            os.fsync(f.fileno())
    except OSError as exc:
        LOGGER.warning("Analytics write failed for %s: %s", target, exc)
