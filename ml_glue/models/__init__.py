"""
🤖 Models модуль - модели машинного обучения

Единственное семейство моделей - линейная регрессия (OLS).
"""

from .base import BaseModel
from .linear_regression import (
    LinearRegression,
    LinearRegressionResult,
    UNTRAINED_SUMMARY,
    linear_regression
)

__all__ = [
    'BaseModel',
    'LinearRegression',
    'LinearRegressionResult',
    'UNTRAINED_SUMMARY',
    'linear_regression'
]
