#!/usr/bin/env python3
"""
📝 Система логирования для ml_glue

Централизованное логирование с красивым форматированием.
"""

import copy
import logging
import sys
from pathlib import Path
from typing import Dict, Optional

class ColoredFormatter(logging.Formatter):
    """Форматтер с цветным выводом"""

    COLORS = {
        'DEBUG': '\033[36m',    # Cyan
        'INFO': '\033[32m',     # Green
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',    # Red
        'CRITICAL': '\033[35m', # Magenta
        'RESET': '\033[0m'      # Reset
    }

    EMOJIS = {
        'DEBUG': '🔍',
        'INFO': 'ℹ️ ',
        'WARNING': '⚠️ ',
        'ERROR': '❌',
        'CRITICAL': '🚨'
    }

    def format(self, record):
        # Запись общая для всех обработчиков, поэтому раскрашиваем копию
        record = copy.copy(record)
        levelname = record.levelname

        # Добавляем эмодзи к сообщениям
        if levelname in self.EMOJIS:
            record.msg = f"{self.EMOJIS[levelname]} {record.msg}"

        # Добавляем цвет к уровню логирования
        if levelname in self.COLORS:
            record.levelname = f"{self.COLORS[levelname]}{levelname}{self.COLORS['RESET']}"

        return super().format(record)

class Logger:
    """Централизованный логгер для ml_glue"""

    def __init__(self, name: str = 'ml_glue', level: str = 'INFO',
                 log_file: Optional[str] = None, log_format: Optional[str] = None):
        """
        Инициализация логгера

        Args:
            name: Имя логгера
            level: Уровень логирования
            log_file: Путь к файлу логов (опционально)
            log_format: Формат логов (опционально)
        """
        self.name = name
        self.logger = logging.getLogger(name)
        self.set_level(level)

        # Очищаем существующие обработчики
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        # Формат по умолчанию
        if log_format is None:
            log_format = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

        # Консольный обработчик
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(ColoredFormatter(log_format))
        self.logger.addHandler(console_handler)

        # Файловый обработчик (если указан)
        if log_file:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(logging.Formatter(log_format))
            self.logger.addHandler(file_handler)

    def set_level(self, level: str):
        """Сменить уровень логирования"""
        self.logger.setLevel(getattr(logging, level.upper()))

    def debug(self, message: str):
        """Логирование отладочной информации"""
        self.logger.debug(message)

    def info(self, message: str):
        """Логирование информационных сообщений"""
        self.logger.info(message)

    def warning(self, message: str):
        """Логирование предупреждений"""
        self.logger.warning(message)

    def error(self, message: str):
        """Логирование ошибок"""
        self.logger.error(message)

    def critical(self, message: str):
        """Логирование критических ошибок"""
        self.logger.critical(message)

    def log_split(self, n_rows: int, train_size: int, test_size: int, random_state: int):
        """Логирование разбиения на train/test"""
        self.info(f"✂️ Разбиение {n_rows} строк: train={train_size}, test={test_size} (seed={random_state})")

    def log_fit(self, model_name: str, n_samples: int, n_features: int):
        """Логирование обучения модели"""
        self.info(f"🤖 Обучение {model_name}: {n_samples} строк, {n_features} признаков")

    def log_metrics(self, title: str, metrics: dict):
        """Логирование метрик"""
        self.info(f"📈 {title}:")
        for metric, value in metrics.items():
            if isinstance(value, float):
                self.info(f"   📊 {metric}: {value:.6f}")
            else:
                self.info(f"   📊 {metric}: {value}")

    def log_error(self, operation: str, error: Exception):
        """Логирование ошибок с контекстом"""
        self.error(f"Ошибка в операции '{operation}': {error}")
        self.debug(f"Детали ошибки: {type(error).__name__}")

_loggers: Dict[str, Logger] = {}

def get_logger(name: str = 'ml_glue', level: str = 'INFO') -> Logger:
    """Получить логгер по имени"""
    if name not in _loggers:
        _loggers[name] = Logger(name, level=level)
    return _loggers[name]
