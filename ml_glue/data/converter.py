#!/usr/bin/env python3
"""
🔢 DataConverter - преобразование табличных данных в числовые массивы

Переводит pandas DataFrame / Series с разнородными колонками и пропусками
в однородные numpy массивы для численных алгоритмов.

Правило для float:
    None / NA / NaT          -> NaN
    число (кроме bool)       -> float(value)
    строка                   -> float(строка) или NaN, если не парсится
    всё остальное            -> NaN

Правило для int отличается намеренно: всё, что не удалось привести, становится 0.
"""

import numbers
from decimal import Decimal
from typing import Any, Sequence, Union

import numpy as np
import pandas as pd

ArrayLike = Union[pd.Series, np.ndarray, Sequence[Any]]
TableLike = Union[pd.DataFrame, np.ndarray, Sequence[Sequence[Any]]]

_INT64_MIN = int(np.iinfo(np.int64).min)
_INT64_MAX = int(np.iinfo(np.int64).max)

def _is_missing(value: Any) -> bool:
    return value is None or value is pd.NA or value is pd.NaT

def _is_bool(value: Any) -> bool:
    return isinstance(value, (bool, np.bool_))

def _as_series(values: ArrayLike) -> pd.Series:
    if isinstance(values, pd.Series):
        return values
    return pd.Series(values, dtype=None if len(values) else 'float64')

def _has_float_fast_path(series: pd.Series) -> bool:
    dtype = series.dtype
    return (
        pd.api.types.is_numeric_dtype(dtype)
        and not pd.api.types.is_bool_dtype(dtype)
        and not pd.api.types.is_complex_dtype(dtype)
    )

def _has_int_fast_path(series: pd.Series) -> bool:
    dtype = series.dtype
    return pd.api.types.is_signed_integer_dtype(dtype)

class DataConverter:
    """Утилиты преобразования pandas -> numpy"""

    @staticmethod
    def convert_to_float(value: Any) -> float:
        """
        Привести одно значение к float

        Никогда не бросает исключений: всё, что нельзя привести, становится NaN.
        """
        if _is_missing(value) or _is_bool(value):
            return np.nan

        if isinstance(value, (numbers.Real, Decimal)):
            try:
                return float(value)
            except (ValueError, OverflowError):
                return np.nan

        if isinstance(value, str):
            try:
                return float(value)
            except ValueError:
                # Категориальные значения сюда не кодируются
                return np.nan

        return np.nan

    @staticmethod
    def convert_to_int(value: Any) -> int:
        """
        Привести одно значение к int

        Дробные числа усекаются к нулю; None, нечисловые строки, NaN/inf, значения
        вне диапазона int64 и прочие типы дают 0.
        """
        if _is_missing(value) or _is_bool(value):
            return 0

        if isinstance(value, numbers.Integral):
            result = int(value)
        elif isinstance(value, (numbers.Real, Decimal)):
            try:
                result = int(value)
            except (ValueError, OverflowError):
                return 0
        elif isinstance(value, str):
            try:
                result = int(value)
            except ValueError:
                return 0
        else:
            return 0

        # Не помещается в int64 - как и нечисловое значение
        if not _INT64_MIN <= result <= _INT64_MAX:
            return 0
        return result

    @staticmethod
    def to_numeric_vector(values: ArrayLike) -> np.ndarray:
        """
        Преобразовать колонку в вектор float64

        Args:
            values: pd.Series, numpy массив или список

        Returns:
            np.ndarray формы (n,)
        """
        series = _as_series(values)

        # Быстрый путь для однородных числовых колонок
        if _has_float_fast_path(series):
            return series.to_numpy(dtype='float64', na_value=np.nan)

        return np.fromiter(
            (DataConverter.convert_to_float(v) for v in series.array),
            dtype='float64',
            count=len(series)
        )

    @staticmethod
    def to_int_vector(values: ArrayLike) -> np.ndarray:
        """
        Преобразовать колонку в вектор int64

        Args:
            values: pd.Series, numpy массив или список

        Returns:
            np.ndarray формы (n,), пропуски и нечисловые значения -> 0
        """
        series = _as_series(values)

        if _has_int_fast_path(series):
            return series.to_numpy(dtype='int64', na_value=0)

        return np.fromiter(
            (DataConverter.convert_to_int(v) for v in series.array),
            dtype='int64',
            count=len(series)
        )

    @staticmethod
    def to_numeric_matrix(data: TableLike) -> np.ndarray:
        """
        Преобразовать таблицу в матрицу float64

        Args:
            data: DataFrame (или 2D массив / вложенный список)

        Returns:
            np.ndarray формы (height, width)
        """
        if not isinstance(data, pd.DataFrame):
            array = np.asarray(data, dtype=object) if not isinstance(data, np.ndarray) else data
            if array.ndim == 1:
                array = array.reshape(-1, 1)
            data = pd.DataFrame(array)

        height, width = data.shape
        if width == 0:
            return np.empty((height, 0), dtype='float64')

        # iloc, а не имена: имена колонок могут повторяться
        columns = [DataConverter.to_numeric_vector(data.iloc[:, j]) for j in range(width)]
        return np.column_stack(columns)
