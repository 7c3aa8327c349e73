#!/usr/bin/env python3
"""
✅ Система валидации для ml_glue

Исключения и проверки входных данных на всех этапах: разбиение, обучение, метрики.
"""

import math
from typing import Any, Sized

import numpy as np
import pandas as pd

class ValidationError(Exception):
    """Базовое исключение для ошибок валидации"""
    pass

class ColumnNotFoundError(ValidationError, KeyError):
    """Колонка с таким именем отсутствует в DataFrame"""

    def __str__(self):
        # KeyError оборачивает сообщение в кавычки
        return str(self.args[0]) if self.args else ''

class InvalidArgumentError(ValidationError, ValueError):
    """Некорректный аргумент (доля вне [0, 1], неверное число колонок и т.п.)"""
    pass

class InsufficientDataError(ValidationError, ValueError):
    """Недостаточно данных для обучения модели"""
    pass

class NotTrainedError(ValidationError, RuntimeError):
    """Модель используется до вызова fit()"""
    pass

class LengthMismatchError(ValidationError, ValueError):
    """Входные последовательности разной длины"""
    pass

class DataValidator:
    """Валидатор данных"""

    @staticmethod
    def validate_target_column(df: pd.DataFrame, target_column: str) -> bool:
        """
        Проверка наличия целевой колонки

        Args:
            df: DataFrame с данными
            target_column: Имя целевой колонки

        Returns:
            True если колонка присутствует

        Raises:
            ColumnNotFoundError: если колонки нет
            InvalidArgumentError: если имя колонки встречается несколько раз
        """
        if target_column not in df.columns:
            raise ColumnNotFoundError(
                f"Колонка '{target_column}' не найдена. Доступные колонки: {list(df.columns)}"
            )

        # Повторяющееся имя: df[target_column] вернул бы DataFrame, а не Series
        n_matches = int((df.columns == target_column).sum())
        if n_matches > 1:
            raise InvalidArgumentError(
                f"Имя колонки '{target_column}' не уникально: найдено {n_matches} колонок"
            )
        return True

    @staticmethod
    def validate_test_size(test_size: float) -> bool:
        """
        Проверка доли тестовой выборки

        Args:
            test_size: Доля тестовой выборки

        Returns:
            True если доля в [0, 1]
        """
        if isinstance(test_size, bool) or not isinstance(test_size, (int, float, np.number)):
            raise InvalidArgumentError(f"test_size must be a number, got {type(test_size).__name__}")

        if math.isnan(test_size) or not 0.0 <= test_size <= 1.0:
            raise InvalidArgumentError(f"test_size must be in [0, 1], got {test_size}")

        return True

    @staticmethod
    def validate_row_count(n_rows: int) -> bool:
        """Проверка числа строк"""
        if n_rows < 0:
            raise InvalidArgumentError(f"Row count must be non-negative, got {n_rows}")
        return True

    @staticmethod
    def validate_same_length(left: Sized, right: Sized, what: str = 'X и y') -> bool:
        """Проверка совпадения длин двух последовательностей"""
        if len(left) != len(right):
            raise LengthMismatchError(f"Размерности {what} не совпадают: {len(left)} и {len(right)}")
        return True

class ModelValidator:
    """Валидатор моделей"""

    @staticmethod
    def validate_fit_input(X: np.ndarray, y: np.ndarray) -> bool:
        """
        Валидация данных для обучения OLS

        Args:
            X: Матрица признаков (n, k)
            y: Таргет (n,)

        Returns:
            True если данных достаточно

        Raises:
            InsufficientDataError: если строк не больше, чем признаков,
                или не осталось степеней свободы
        """
        if X.ndim != 2:
            raise InvalidArgumentError(f"X должен быть 2D массивом, получено измерений: {X.ndim}")

        n_samples, n_features = X.shape

        if n_samples != len(y):
            raise InsufficientDataError(
                f"Размерности X ({n_samples}) и y ({len(y)}) не совпадают"
            )

        if n_samples <= n_features:
            raise InsufficientDataError(
                f"Недостаточно данных: {n_samples} строк для {n_features} признаков"
            )

        # n - k - 1 степеней свободы для adjusted R² и дисперсии остатков
        if n_samples - n_features - 1 <= 0:
            raise InsufficientDataError(
                f"Нет степеней свободы: n - k - 1 = {n_samples - n_features - 1}"
            )

        return True

    @staticmethod
    def validate_is_trained(model: Any) -> bool:
        """Проверка, что модель обучена"""
        if not getattr(model, 'is_fitted', False):
            raise NotTrainedError("Model must be trained with fit() before making predictions")
        return True

    @staticmethod
    def validate_prediction_input(X: np.ndarray, n_coefficients: int, strict: bool = False) -> bool:
        """
        Валидация входных данных для предсказания

        Args:
            X: Матрица признаков
            n_coefficients: Число коэффициентов модели
            strict: Требовать точное совпадение числа колонок

        Returns:
            True если входные данные валидны
        """
        if X.ndim != 2:
            raise InvalidArgumentError(f"X должен быть 2D массивом, получено измерений: {X.ndim}")

        if strict and X.shape[1] != n_coefficients:
            raise InvalidArgumentError(
                f"Неверное количество признаков: {X.shape[1]} (ожидается {n_coefficients})"
            )

        return True

class MetricsValidator:
    """Валидатор входных данных метрик"""

    @staticmethod
    def validate_pair(truth: np.ndarray, predictions: np.ndarray) -> bool:
        """
        Проверка пары (истина, предсказание)

        Raises:
            LengthMismatchError: если длины различаются
            InvalidArgumentError: если данные пустые
        """
        if len(truth) != len(predictions):
            raise LengthMismatchError(
                f"Series must be same length: truth={len(truth)}, predictions={len(predictions)}"
            )

        if len(truth) == 0:
            raise InvalidArgumentError("Series cannot be empty")

        return True
