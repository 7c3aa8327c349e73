"""
ml_glue - обёртки над pandas / numpy / scipy / scikit-learn для ноутбуков
========================================================================

Один сквозной сценарий:

    X, y = split_target(df, 'price')
    split = train_test_split(X, y, test_size=0.3, random_state=42)
    model = linear_regression()
    model.fit(split.X_train, split.y_train)
    print(model.summary())
    print(rmse(split.y_test, model.predict(split.X_test)))
"""

from .data import DataConverter, TrainTestSplit, split_target, train_test_split
from .evaluation import RegressionMetrics, mae, mse, rmse, r2, calculate_metrics
from .models import BaseModel, LinearRegression, LinearRegressionResult, linear_regression
from .systems import RegressionSystem, ExperimentResult
from .utils import (
    Config,
    ValidationError,
    ColumnNotFoundError,
    InvalidArgumentError,
    InsufficientDataError,
    NotTrainedError,
    LengthMismatchError
)

__all__ = [
    'DataConverter',
    'TrainTestSplit',
    'split_target',
    'train_test_split',
    'RegressionMetrics',
    'mae',
    'mse',
    'rmse',
    'r2',
    'calculate_metrics',
    'BaseModel',
    'LinearRegression',
    'LinearRegressionResult',
    'linear_regression',
    'RegressionSystem',
    'ExperimentResult',
    'Config',
    'ValidationError',
    'ColumnNotFoundError',
    'InvalidArgumentError',
    'InsufficientDataError',
    'NotTrainedError',
    'LengthMismatchError'
]

__version__ = '1.0.0'
