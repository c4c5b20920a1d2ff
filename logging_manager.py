#!/usr/bin/env python3
# /logging_manager.py
"""Настройка логирования приложения по секции ``logging`` настроек."""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


class LoggingManager:
    """Подключает консольный и ротируемый файловый обработчики к корневому логгеру."""

    _handlers: list = []

    def __init__(self, config: Optional[Dict[str, Any]] = None) -> None:
        self.config = config or {}
        self.level = self._parse_level(self.config.get("level", "INFO"))
        self.log_file = self.config.get("file")
        self.max_bytes = int(self.config.get("max_bytes", 1048576))
        self.backup_count = int(self.config.get("backup_count", 5))
        self._configure()

    @staticmethod
    def _parse_level(level: Any) -> int:
        if isinstance(level, int):
            return level
        resolved = logging.getLevelName(str(level).upper())
        return resolved if isinstance(resolved, int) else logging.INFO

    def _configure(self) -> None:
        root = logging.getLogger()
        # Повторный вызов заменяет обработчики, а не дублирует их.
        for handler in LoggingManager._handlers:
            root.removeHandler(handler)
            handler.close()
        LoggingManager._handlers = []

        formatter = logging.Formatter(LOG_FORMAT)
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        console_handler.setLevel(self.level)
        LoggingManager._handlers.append(console_handler)

        if self.log_file:
            directory = os.path.dirname(self.log_file)
            if directory:
                os.makedirs(directory, exist_ok=True)
            file_handler = RotatingFileHandler(
                self.log_file,
                maxBytes=self.max_bytes,
                backupCount=self.backup_count,
                encoding="utf-8",
            )
            file_handler.setFormatter(formatter)
            file_handler.setLevel(self.level)
            LoggingManager._handlers.append(file_handler)

        for handler in LoggingManager._handlers:
            root.addHandler(handler)
        root.setLevel(self.level)


__all__ = ["LOG_FORMAT", "LoggingManager", "get_logger"]
