#!/usr/bin/env python3
"""
🏗️ Базовый класс ML системы

Центральный компонент, связывающий шаги пайплайна:
подготовка данных -> разбиение -> обучение -> оценка.
"""

from typing import Any, Dict, Optional, Tuple

import pandas as pd

from ..data.splitter import TrainTestSplit, split_target, train_test_split
from ..evaluation.metrics import RegressionMetrics, calculate_metrics
from ..models.linear_regression import LinearRegression, LinearRegressionResult
from ..utils.config import Config
from ..utils.logger import Logger, get_logger
from ..utils.validators import InvalidArgumentError, ValidationError

class BaseSystem:
    """
    Базовый класс ML системы

    Каждый шаг логирует начало и результат; ошибки логируются и пробрасываются дальше.
    """

    def __init__(self, config: Optional[Config] = None):
        """
        Инициализация системы

        Args:
            config: Конфигурация системы (по умолчанию Config())
        """
        self.config = config if config is not None else Config()

        # Инициализируем логгер
        self.logger = Logger(
            name=self.__class__.__name__,
            level=self.config.log_level,
            log_file=self.config.log_file,
            log_format=self.config.log_format
        )

        # Общий логгер библиотеки (разбиение, обучение) следует уровню из конфига
        get_logger().set_level(self.config.log_level)

        self.logger.info("🏗️ Базовая система инициализирована")

    def prepare_data(self, df: pd.DataFrame, target_column: str) -> Tuple[pd.DataFrame, pd.Series]:
        """
        Отделение таргета от признаков

        Args:
            df: DataFrame с данными
            target_column: Имя целевой колонки

        Returns:
            (X, y)
        """
        # Валидация входных данных
        if df is None or not isinstance(df, pd.DataFrame):
            raise InvalidArgumentError("Data must be a pandas DataFrame")

        if not target_column or not isinstance(target_column, str):
            raise InvalidArgumentError("Target column must be a non-empty string")

        self.logger.info(f"🎯 Отделение таргета '{target_column}'")

        try:
            X, y = split_target(df, target_column)
            self.logger.info(f"✅ Данные подготовлены: X={X.shape}, y={y.shape}")
            return X, y

        except ValidationError as e:
            self.logger.log_error('prepare_data', e)
            raise

    def split_data(self, X: pd.DataFrame, y: pd.Series,
                   test_size: Optional[float] = None,
                   random_state: Optional[int] = None) -> TrainTestSplit:
        """
        Разбиение на train/test

        Args:
            X: Признаки
            y: Таргет
            test_size: Доля теста (по умолчанию из config.split)
            random_state: Seed (по умолчанию из config.split)

        Returns:
            TrainTestSplit
        """
        if test_size is None:
            test_size = self.config.split.test_size
        if random_state is None:
            random_state = self.config.split.random_state

        self.logger.info(f"✂️ Разбиение данных: test_size={test_size}, seed={random_state}")

        try:
            split = train_test_split(X, y, test_size=test_size, random_state=random_state)
            self.logger.info(f"✅ Train: {split.X_train.shape}, Test: {split.X_test.shape}")
            return split

        except ValidationError as e:
            self.logger.log_error('split_data', e)
            raise

    def train_model(self, X: Any, y: Any) -> Tuple[LinearRegression, LinearRegressionResult]:
        """
        Обучение линейной регрессии

        Args:
            X: Признаки
            y: Таргет

        Returns:
            (model, result)
        """
        self.logger.info("🤖 Обучение модели")

        try:
            model = LinearRegression.from_config(self.config.model)
            result = model.fit(X, y)
            self.logger.info(f"✅ Модель обучена: R²={result.r_squared:.4f}")
            return model, result

        except ValidationError as e:
            self.logger.log_error('train_model', e)
            raise

    def evaluate_model(self, model: LinearRegression, X: Any, y: Any,
                       title: str = 'Метрики') -> RegressionMetrics:
        """
        Оценка модели на выборке

        Args:
            model: Обученная модель
            X: Признаки
            y: Истинные значения
            title: Заголовок для лога

        Returns:
            RegressionMetrics
        """
        try:
            predictions = model.predict(X)
            metrics = calculate_metrics(y, predictions)
            self.logger.log_metrics(title, metrics.to_dict())
            return metrics

        except ValidationError as e:
            self.logger.log_error('evaluate_model', e)
            raise

    def get_system_info(self) -> Dict[str, Any]:
        """
        Получение информации о системе

        Returns:
            Словарь с информацией о системе
        """
        return {
            'system': self.__class__.__name__,
            'config': self.config.to_dict()
        }
