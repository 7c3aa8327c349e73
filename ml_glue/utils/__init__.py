"""
🔧 Utils модуль - утилиты и вспомогательные функции

Содержит конфигурацию, логирование и валидацию.
"""

from .config import Config, SplitConfig, ModelConfig
from .logger import Logger, get_logger
from .validators import (
    ValidationError,
    ColumnNotFoundError,
    InvalidArgumentError,
    InsufficientDataError,
    NotTrainedError,
    LengthMismatchError,
    DataValidator,
    ModelValidator,
    MetricsValidator
)

__all__ = [
    'Config',
    'SplitConfig',
    'ModelConfig',
    'Logger',
    'get_logger',
    'ValidationError',
    'ColumnNotFoundError',
    'InvalidArgumentError',
    'InsufficientDataError',
    'NotTrainedError',
    'LengthMismatchError',
    'DataValidator',
    'ModelValidator',
    'MetricsValidator'
]
