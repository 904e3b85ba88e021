"""Debug logging for hooks.

stdout is reserved for the JSON result, so a hook's logger either appends to a
file or discards everything. It never has a stream handler.
"""

from __future__ import annotations

__all__ = [
    'LogConfig',
    'close_hook_logger',
    'open_hook_logger',
]

import logging
from pathlib import Path

from claude_hook_kit.schemas.base import StrictModel

_LOG_FORMAT = '[%(asctime)s] [%(levelname)s] %(message)s'
_DATE_FORMAT = '%Y-%m-%dT%H:%M:%S%z'


class LogConfig(StrictModel):
    """Where a hook's debug log goes. No path means logging is disabled."""

    path: Path | None = None

    @classmethod
    def disabled(cls) -> LogConfig:
        return cls()

    @classmethod
    def to_file(cls, path: str | Path) -> LogConfig:
        return cls(path=Path(path).expanduser())

    @property
    def enabled(self) -> bool:
        return self.path is not None


def open_hook_logger(name: str, config: LogConfig) -> logging.Logger:
    """Create the logger for one hook transaction.

    Enabled: appends to ``config.path`` (created along with its parent
    directories when missing). Disabled: every record is dropped.
    """
    logger = logging.getLogger(f'claude_hook_kit.hooks.{name}')
    close_hook_logger(logger)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    if config.path is None:
        logger.addHandler(logging.NullHandler())
        logger.disabled = True
        return logger

    config.path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(config.path, mode='a', encoding='utf-8')
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    logger.addHandler(handler)
    logger.disabled = False
    return logger


def close_hook_logger(logger: logging.Logger) -> None:
    """Flush, close and detach every handler on ``logger``."""
    for handler in list(logger.handlers):
        handler.flush()
        handler.close()
        logger.removeHandler(handler)
