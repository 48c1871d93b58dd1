"""Logging setup driven by LoggingSettings."""

import logging
from enum import Enum
from typing import Optional, Union

from .schemas import LoggingSettings


def _level_name(level: Union[str, Enum]) -> str:
    return level.value if isinstance(level, Enum) else str(level).upper()


def setup_logging(settings: Optional[LoggingSettings] = None) -> None:
    """Configure the root logger and per-module levels.

    Args:
        settings: Logging settings; defaults apply when omitted
    """
    settings = settings or LoggingSettings()
    level = _level_name(settings.level)
    logging.basicConfig(level=level, format=settings.format, force=True)

    for name, module_level in settings.log_modules.items():
        logging.getLogger(name).setLevel(_level_name(module_level))

    logging.getLogger(__name__).debug(
        f"Logging configured at {level} with {len(settings.log_modules)} "
        "module override(s)"
    )


__all__ = ["setup_logging"]
