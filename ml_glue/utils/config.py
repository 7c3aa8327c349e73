#!/usr/bin/env python3
"""
⚙️ Система конфигурации для ml_glue

Централизованное управление настройками: логирование, разбиение данных, модель.
"""

import json
from typing import Dict, Optional, Any
from dataclasses import dataclass, field

@dataclass
class SplitConfig:
    """Конфигурация для разбиения на train/test"""
    test_size: float = 0.2
    random_state: int = 42

@dataclass
class ModelConfig:
    """Конфигурация для обучения линейной регрессии"""
    # Строгий режим: число колонок в predict должно совпадать с числом коэффициентов
    strict_predict: bool = False
    # Порог (относительно max|diag(R)|) для вырожденной матрицы плана
    singular_tolerance: float = 1e-10

@dataclass
class Config:
    """Основная конфигурация системы"""
    # Настройки логирования
    log_level: str = 'INFO'
    log_format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    log_file: Optional[str] = None

    # Подконфигурации
    split: SplitConfig = field(default_factory=SplitConfig)
    model: ModelConfig = field(default_factory=ModelConfig)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        """Создать конфигурацию из словаря"""
        config_dict = dict(config_dict)

        # Восстанавливаем подконфигурации
        if isinstance(config_dict.get('split'), dict):
            config_dict['split'] = SplitConfig(**config_dict['split'])
        if isinstance(config_dict.get('model'), dict):
            config_dict['model'] = ModelConfig(**config_dict['model'])

        return cls(**config_dict)

    def to_dict(self) -> Dict[str, Any]:
        """Преобразовать конфигурацию в словарь"""
        return {
            'log_level': self.log_level,
            'log_format': self.log_format,
            'log_file': self.log_file,
            'split': {
                'test_size': self.split.test_size,
                'random_state': self.split.random_state
            },
            'model': {
                'strict_predict': self.model.strict_predict,
                'singular_tolerance': self.model.singular_tolerance
            }
        }

    def save(self, path: str):
        """Сохранить конфигурацию в файл"""
        with open(path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, path: str) -> 'Config':
        """Загрузить конфигурацию из файла"""
        with open(path, 'r') as f:
            config_dict = json.load(f)

        return cls.from_dict(config_dict)

# Предустановленные конфигурации
DEFAULT_CONFIG = Config()

STRICT_CONFIG = Config(
    model=ModelConfig(
        strict_predict=True
    )
)

QUIET_CONFIG = Config(
    log_level='WARNING'
)
