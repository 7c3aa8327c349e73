#!/usr/bin/env python3
"""
📊 Метрики качества регрессии

MAE, MSE, RMSE и R² между истинными значениями и предсказаниями
поверх sklearn.metrics. Пропуски (NaN/inf после преобразования) не являются
ошибкой: метрика для такой пары - NaN.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Tuple

import numpy as np
from sklearn.metrics import mean_absolute_error, mean_squared_error, r2_score

from ..data.converter import DataConverter
from ..utils.validators import MetricsValidator

@dataclass(frozen=True)
class RegressionMetrics:
    """Набор метрик регрессии"""
    mae: float
    mse: float
    rmse: float
    r2: float
    n_samples: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

def _prepare(truth: Any, predictions: Any) -> Tuple[np.ndarray, np.ndarray]:
    truth_arr = DataConverter.to_numeric_vector(truth)
    pred_arr = DataConverter.to_numeric_vector(predictions)
    MetricsValidator.validate_pair(truth_arr, pred_arr)
    return truth_arr, pred_arr

def _all_finite(truth: np.ndarray, predictions: np.ndarray) -> bool:
    # sklearn отклоняет NaN/inf, у нас они дают NaN
    return bool(np.isfinite(truth).all() and np.isfinite(predictions).all())

def mae(truth: Any, predictions: Any) -> float:
    """Mean Absolute Error: mean(|t - p|)"""
    truth_arr, pred_arr = _prepare(truth, predictions)
    if not _all_finite(truth_arr, pred_arr):
        return float('nan')
    return float(mean_absolute_error(truth_arr, pred_arr))

def mse(truth: Any, predictions: Any) -> float:
    """Mean Squared Error: mean((t - p)²)"""
    truth_arr, pred_arr = _prepare(truth, predictions)
    if not _all_finite(truth_arr, pred_arr):
        return float('nan')
    return float(mean_squared_error(truth_arr, pred_arr))

def rmse(truth: Any, predictions: Any) -> float:
    """Root Mean Squared Error: sqrt(MSE)"""
    return float(np.sqrt(mse(truth, predictions)))

def r2(truth: Any, predictions: Any) -> float:
    """
    Коэффициент детерминации: 1 - SSres / SStot

    Для постоянного truth (SStot = 0) R² не определён, возвращается NaN
    (r2_score в этом случае подставил бы 0 или 1).
    Может быть отрицательным, если предсказания хуже среднего.
    """
    truth_arr, pred_arr = _prepare(truth, predictions)
    if not _all_finite(truth_arr, pred_arr):
        return float('nan')

    ss_tot = float(np.sum((truth_arr - truth_arr.mean()) ** 2))
    if ss_tot == 0:
        return float('nan')

    return float(r2_score(truth_arr, pred_arr))

def calculate_metrics(truth: Any, predictions: Any) -> RegressionMetrics:
    """
    Рассчитать все метрики регрессии

    Args:
        truth: Истинные значения
        predictions: Предсказания

    Returns:
        RegressionMetrics
    """
    truth_arr, pred_arr = _prepare(truth, predictions)
    mse_value = mse(truth_arr, pred_arr)

    return RegressionMetrics(
        mae=mae(truth_arr, pred_arr),
        mse=mse_value,
        rmse=float(np.sqrt(mse_value)),
        r2=r2(truth_arr, pred_arr),
        n_samples=len(truth_arr)
    )
