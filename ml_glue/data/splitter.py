#!/usr/bin/env python3
"""
✂️ Разбиение датасета

- split_target: отделение целевой колонки от признаков
- train_test_split: воспроизводимое случайное разбиение строк на train/test

Перемешивание - Фишер-Йетс "сверху вниз": для i = n-1 .. 1 берём j из [0, i]
и меняем местами i и j. Генератор - numpy.random.default_rng(seed), поэтому
один и тот же seed и n всегда дают одну и ту же перестановку.
"""

import math
from dataclasses import dataclass
from typing import Any, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from ..utils.logger import get_logger
from ..utils.validators import DataValidator

logger = get_logger()

@dataclass(frozen=True)
class TrainTestSplit:
    """
    Результат разбиения на train/test

    Attributes:
        X_train, y_train: Обучающая часть
        X_test, y_test: Тестовая часть
        train_indices, test_indices: Позиции строк исходного датасета в порядке перестановки
    """
    X_train: pd.DataFrame
    y_train: pd.Series
    X_test: pd.DataFrame
    y_test: pd.Series
    train_indices: np.ndarray
    test_indices: np.ndarray

    @property
    def train_size(self) -> int:
        return len(self.train_indices)

    @property
    def test_size(self) -> int:
        return len(self.test_indices)

    def __iter__(self):
        # Позволяет распаковку в стиле sklearn: X_train, X_test, y_train, y_test = split
        return iter((self.X_train, self.X_test, self.y_train, self.y_test))

def split_target(df: pd.DataFrame, target_column: str) -> Tuple[pd.DataFrame, pd.Series]:
    """
    Отделить целевую колонку от признаков

    Args:
        df: Исходный DataFrame
        target_column: Имя целевой колонки

    Returns:
        (X, y): X - все остальные колонки в исходном порядке, y - целевая колонка

    Raises:
        ColumnNotFoundError: если колонки нет
        InvalidArgumentError: если имя целевой колонки не уникально
    """
    DataValidator.validate_target_column(df, target_column)

    y = df[target_column]
    X = df.drop(columns=[target_column])

    logger.debug(f"Таргет '{target_column}' отделён: X={X.shape}, y={y.shape}")
    return X, y

def compute_test_count(n_rows: int, test_size: float) -> int:
    """Размер тестовой выборки: round(test_size * n) с округлением половины вверх"""
    DataValidator.validate_row_count(n_rows)
    DataValidator.validate_test_size(test_size)
    return int(math.floor(test_size * n_rows + 0.5))

def shuffled_indices(n_rows: int, random_state: Optional[int] = 42) -> np.ndarray:
    """
    Случайная перестановка [0, n) перемешиванием Фишера-Йетса

    Args:
        n_rows: Число строк
        random_state: Seed генератора

    Returns:
        np.ndarray перестановки индексов
    """
    DataValidator.validate_row_count(n_rows)

    rng = np.random.default_rng(random_state)
    indices = np.arange(n_rows)

    for i in range(n_rows - 1, 0, -1):
        j = int(rng.integers(0, i + 1))
        indices[i], indices[j] = indices[j], indices[i]

    return indices

def train_test_split(X: Union[pd.DataFrame, np.ndarray],
                     y: Union[pd.Series, np.ndarray, Sequence[Any]],
                     test_size: float = 0.2,
                     random_state: Optional[int] = 42) -> TrainTestSplit:
    """
    Разбить данные на обучающую и тестовую выборки

    Args:
        X: DataFrame с признаками
        y: Таргет
        test_size: Доля тестовой выборки в [0, 1]
        random_state: Seed для воспроизводимости

    Returns:
        TrainTestSplit

    Raises:
        InvalidArgumentError: если test_size вне [0, 1]
        LengthMismatchError: если число строк X и y различается
    """
    if not isinstance(X, pd.DataFrame):
        X = pd.DataFrame(X)
    if not isinstance(y, pd.Series):
        y = pd.Series(y, index=X.index if len(y) == len(X) else None)

    DataValidator.validate_same_length(X, y)

    n_rows = len(X)
    test_count = compute_test_count(n_rows, test_size)
    train_count = n_rows - test_count

    indices = shuffled_indices(n_rows, random_state)
    train_indices = indices[:train_count]
    test_indices = indices[train_count:]

    split = TrainTestSplit(
        X_train=X.iloc[train_indices],
        y_train=y.iloc[train_indices],
        X_test=X.iloc[test_indices],
        y_test=y.iloc[test_indices],
        train_indices=train_indices,
        test_indices=test_indices
    )

    logger.log_split(n_rows, train_count, test_count, random_state)
    return split
