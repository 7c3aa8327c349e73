"""Evaluation metrics for regression."""
from .metrics import RegressionMetrics, mae, mse, rmse, r2, calculate_metrics

__all__ = ['RegressionMetrics', 'mae', 'mse', 'rmse', 'r2', 'calculate_metrics']
