from __future__ import annotations

import logging
import logging.handlers
import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

if TYPE_CHECKING:
    from certoids.app_config import AppConfig


@dataclass(frozen=True)
class LoggingConfig:
    level: str
    log_dir: Path
    log_file: str = "certoids.log"
    console: bool = True
    max_bytes: int = 10 * 1024 * 1024
    backup_count: int = 5


class ColoredFormatter(logging.Formatter):
    """Console formatter that wraps the level name in an ANSI colour."""

    COLORS = {
        logging.DEBUG: "36",
        logging.INFO: "32",
        logging.WARNING: "33",
        logging.ERROR: "31",
        logging.CRITICAL: "35",
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelno)
        if color is None:
            return super().format(record)
        # Format a copy so the file handler still sees the plain level name
        colored = logging.makeLogRecord(record.__dict__)
        colored.levelname = f"\033[{color}m{record.levelname}\033[0m"
        return super().format(colored)


class AppLogger:
    _configured: bool = False

    @staticmethod
    def configure(app_config: "AppConfig") -> None:
        """
        Configure logging from an AppConfig instance.
        """
        logger_cfg = cast(dict[str, Any], app_config.get('logger', {}) or {})
        config = LoggingConfig(
            level=logger_cfg.get('level', 'INFO'),
            log_dir=Path(os.path.abspath(logger_cfg.get('log_dir', 'logs'))),
            log_file=logger_cfg.get('log_file', 'certoids.log'),
            console=logger_cfg.get('console', True),
            max_bytes=logger_cfg.get('max_bytes', 10 * 1024 * 1024),
            backup_count=logger_cfg.get('backup_count', 5),
        )
        AppLogger(config)

    def __init__(self, config: LoggingConfig) -> None:
        if AppLogger._configured:
            return
        self._configure(config)
        AppLogger._configured = True

    @staticmethod
    def get(name: str | None = None) -> logging.Logger:
        return logging.getLogger(name)

    @staticmethod
    def _configure(config: LoggingConfig) -> None:
        level = logging.getLevelName(config.level.upper())
        if not isinstance(level, int):
            level = logging.INFO

        config.log_dir.mkdir(parents=True, exist_ok=True)
        log_path = config.log_dir / config.log_file

        root = logging.getLogger()
        root.setLevel(level)

        for handler in list(root.handlers):
            root.removeHandler(handler)

        fmt = (
            "%(asctime)s.%(msecs)03d "
            "%(levelname)s "
            "%(name)s "
            "[%(threadName)s] "
            "%(message)s"
        )
        formatter = logging.Formatter(fmt=fmt, datefmt="%Y-%m-%d %H:%M:%S")

        file_handler = logging.handlers.RotatingFileHandler(
            filename=log_path,
            maxBytes=config.max_bytes,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

        if config.console:
            console_handler = logging.StreamHandler()
            console_handler.setLevel(level)
            console_handler.setFormatter(ColoredFormatter(fmt=fmt, datefmt="%Y-%m-%d %H:%M:%S"))
            root.addHandler(console_handler)

        AppLogger._suppress_third_party_loggers()

    @staticmethod
    def _suppress_third_party_loggers() -> None:
        logging.getLogger("dynaconf").setLevel(logging.WARNING)
