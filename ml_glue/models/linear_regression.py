#!/usr/bin/env python3
"""
📈 LinearRegression - линейная регрессия методом наименьших квадратов

Математика:
-----------
Матрица плана с константой: A = [1 | X], размер (n, k + 1)

    β = argmin ||y - Aβ||²,   решение через QR: A = QR,  Rβ = Qᵀy

    SSres = Σ(yᵢ - ŷᵢ)²,  SStot = Σ(yᵢ - ȳ)²
    R²          = 1 - SSres / SStot
    Adjusted R² = 1 - (1 - R²)(n - 1) / (n - k - 1)
    σ²          = SSres / (n - k - 1)

Каждый fit() возвращает новый неизменяемый LinearRegressionResult; оценщик
хранит только последний снимок. Один экземпляр не рассчитан на параллельные
fit/predict из разных потоков: вызовы нужно сериализовать снаружи.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

import numpy as np
import pandas as pd
from scipy.linalg import qr, solve_triangular

from .base import BaseModel
from ..data.converter import DataConverter
from ..utils.config import ModelConfig
from ..utils.logger import get_logger
from ..utils.validators import InsufficientDataError, ModelValidator, NotTrainedError

logger = get_logger()

UNTRAINED_SUMMARY = "Untrained Linear Regression Model"

@dataclass(frozen=True)
class LinearRegressionResult:
    """
    Снимок обученной линейной регрессии

    Attributes:
        intercept: Свободный член
        coefficients: Коэффициенты в порядке feature_names (только для чтения)
        feature_names: Имена признаков на момент обучения
        r_squared: Коэффициент детерминации
        adjusted_r_squared: R² с поправкой на число признаков
        residual_variance: Несмещённая оценка дисперсии ошибки
        n_samples: Число строк обучающей выборки
    """
    intercept: float
    coefficients: np.ndarray
    feature_names: Tuple[str, ...]
    r_squared: float
    adjusted_r_squared: float
    residual_variance: float
    n_samples: int

    @property
    def n_features(self) -> int:
        return len(self.coefficients)

    @property
    def residual_standard_error(self) -> float:
        return float(np.sqrt(self.residual_variance))

    def predict(self, X: Any, strict: bool = False) -> np.ndarray:
        """
        Предсказания для матрицы признаков

        Колонки интерпретируются по позиции. В нестрогом режиме используются
        только первые min(число колонок, число коэффициентов) колонок: узкая
        таблица молча игнорирует недостающие коэффициенты, лишние колонки
        отбрасываются.

        Args:
            X: DataFrame или 2D массив
            strict: Требовать совпадения числа колонок с числом коэффициентов

        Returns:
            np.ndarray формы (n,)
        """
        if isinstance(X, pd.Series):
            X = X.to_frame()

        X_arr = DataConverter.to_numeric_matrix(X)
        ModelValidator.validate_prediction_input(X_arr, self.n_features, strict=strict)

        n_used = min(X_arr.shape[1], self.n_features)
        return self.intercept + X_arr[:, :n_used] @ self.coefficients[:n_used]

    def summary(self) -> str:
        """Формула модели и статистики качества"""
        lines = [
            "Linear Regression Model",
            "----------------------",
        ]

        formula = f"Formula: y = {self.intercept:.4f}"
        for i, coef in enumerate(self.coefficients):
            name = self.feature_names[i] if i < len(self.feature_names) else f"x{i}"
            sign = '+' if coef >= 0 else '-'
            formula += f" {sign} {abs(coef):.4f} * {name}"
        lines.append(formula)

        lines.append("")
        lines.append(f"R²: {self.r_squared:.4f}")
        lines.append(f"Adjusted R²: {self.adjusted_r_squared:.4f}")
        lines.append(f"Residual Standard Error: {self.residual_standard_error:.4f}")

        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        """Параметры и статистики в виде словаря"""
        return {
            'intercept': self.intercept,
            'coefficients': dict(zip(self.feature_names, self.coefficients.tolist())),
            'r2': self.r_squared,
            'adjusted_r2': self.adjusted_r_squared,
            'residual_variance': self.residual_variance,
            'n_samples': self.n_samples,
            'n_features': self.n_features
        }

class LinearRegression(BaseModel):
    """
    Линейная регрессия (OLS с константой)

    Parameters
    ----------
    strict : bool, default=False
        Если True, predict() требует ровно столько колонок, сколько коэффициентов.
    singular_tolerance : float, default=1e-10
        Относительный порог для диагонали R при проверке вырожденности.

    Examples
    --------
    >>> model = LinearRegression()
    >>> result = model.fit(pd.DataFrame({'x': [1, 2, 3, 4]}), [3.0, 5.0, 7.0, 9.0])
    >>> print(round(result.intercept, 6), round(float(result.coefficients[0]), 6))
    1.0 2.0
    """

    def __init__(self, strict: bool = False, singular_tolerance: float = 1e-10):
        self.strict = strict
        self.singular_tolerance = singular_tolerance
        self.result_: Optional[LinearRegressionResult] = None

    @classmethod
    def from_config(cls, config: ModelConfig) -> 'LinearRegression':
        """Создать модель из ModelConfig"""
        return cls(strict=config.strict_predict, singular_tolerance=config.singular_tolerance)

    @property
    def is_fitted(self) -> bool:
        return self.result_ is not None

    def fit(self, X: Any, y: Any) -> LinearRegressionResult:
        """
        Обучение модели

        Args:
            X: DataFrame с признаками (или 2D массив)
            y: Таргет (Series, массив или список)

        Returns:
            Новый LinearRegressionResult

        Raises:
            InsufficientDataError: строк не больше, чем признаков, нет степеней
                свободы, длины X и y различаются или матрица плана вырождена
        """
        # Повторный fit начинается с чистого состояния
        self.result_ = None

        if isinstance(X, pd.Series):
            X = X.to_frame()

        X_arr = DataConverter.to_numeric_matrix(X)
        y_arr = DataConverter.to_numeric_vector(y)
        ModelValidator.validate_fit_input(X_arr, y_arr)

        n_samples, n_features = X_arr.shape
        if isinstance(X, pd.DataFrame):
            feature_names = tuple(str(name) for name in X.columns)
        else:
            feature_names = tuple(f"x{j}" for j in range(n_features))

        logger.log_fit('LinearRegression', n_samples, n_features)

        design = np.column_stack([np.ones(n_samples), X_arr])
        beta = self._solve(design, y_arr)

        residuals = y_arr - design @ beta
        ss_res = float(residuals @ residuals)
        ss_tot = float(np.sum((y_arr - y_arr.mean()) ** 2))
        dof = n_samples - n_features - 1

        # Постоянный таргет: 0/0, R² не определён
        r_squared = 1.0 - ss_res / ss_tot if ss_tot != 0 else np.nan
        adjusted_r_squared = 1.0 - (1.0 - r_squared) * (n_samples - 1) / dof

        coefficients = beta[1:].copy()
        coefficients.setflags(write=False)

        result = LinearRegressionResult(
            intercept=float(beta[0]),
            coefficients=coefficients,
            feature_names=feature_names,
            r_squared=float(r_squared),
            adjusted_r_squared=float(adjusted_r_squared),
            residual_variance=ss_res / dof,
            n_samples=n_samples
        )

        logger.debug(f"R²={result.r_squared:.4f}, adjusted R²={result.adjusted_r_squared:.4f}")
        self.result_ = result
        return result

    def _solve(self, design: np.ndarray, y: np.ndarray) -> np.ndarray:
        """Решение задачи наименьших квадратов через QR"""
        if not np.isfinite(design).all() or not np.isfinite(y).all():
            # NaN и inf не являются ошибкой, но решение для них не определено
            logger.warning("Во входных данных есть NaN или inf: коэффициенты будут NaN")
            return np.full(design.shape[1], np.nan)

        q, r = qr(design, mode='economic')

        diag = np.abs(np.diag(r))
        if diag.max() == 0 or (diag < self.singular_tolerance * diag.max()).any():
            raise InsufficientDataError("Матрица плана вырождена: признаки линейно зависимы")

        return solve_triangular(r, q.T @ y)

    def predict(self, X: Any) -> np.ndarray:
        """
        Предсказания обученной модели

        Raises:
            NotTrainedError: если fit() ещё не вызывался
        """
        ModelValidator.validate_is_trained(self)
        return self.result_.predict(X, strict=self.strict)

    def summary(self) -> str:
        """Формула и статистики, либо сообщение о необученной модели"""
        if self.result_ is None:
            return UNTRAINED_SUMMARY
        return self.result_.summary()

    def _require_result(self) -> LinearRegressionResult:
        if self.result_ is None:
            raise NotTrainedError("Model must be trained with fit() before accessing parameters")
        return self.result_

    @property
    def intercept_(self) -> float:
        return self._require_result().intercept

    @property
    def coef_(self) -> np.ndarray:
        return self._require_result().coefficients

    @property
    def feature_names_(self) -> Tuple[str, ...]:
        return self._require_result().feature_names

    @property
    def r_squared_(self) -> float:
        return self._require_result().r_squared

    @property
    def adjusted_r_squared_(self) -> float:
        return self._require_result().adjusted_r_squared

    @property
    def residual_variance_(self) -> float:
        return self._require_result().residual_variance

def linear_regression(config: Optional[ModelConfig] = None) -> LinearRegression:
    """Создать новую линейную регрессию"""
    if config is None:
        return LinearRegression()
    return LinearRegression.from_config(config)
