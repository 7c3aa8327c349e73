#!/usr/bin/env python3
"""
📊 Baseline Models - базовые модели для сравнения

Простые модели-константы (среднее, медиана) для оценки того, насколько
линейная регрессия лучше наивного предсказания.
"""

import math
from typing import Any, Dict, Optional, Tuple

import numpy as np
from sklearn.dummy import DummyRegressor

from ..data.converter import DataConverter
from ..evaluation.metrics import calculate_metrics
from ..utils.logger import get_logger

class BaselineModels:
    """
    Класс для создания и оценки базовых моделей
    """

    STRATEGIES = ('mean', 'median')

    def __init__(self):
        self.logger = get_logger()

    def create_regression_baselines(self, X_train: Any, y_train: Any,
                                    X_test: Any, y_test: Any) -> Dict[str, Dict[str, float]]:
        """
        Создает и оценивает базовые модели для регрессии

        Args:
            X_train, y_train: Тренировочные данные
            X_test, y_test: Тестовые данные

        Returns:
            Словарь с метриками для каждой базовой модели
        """
        X_train_arr = DataConverter.to_numeric_matrix(X_train)
        X_test_arr = DataConverter.to_numeric_matrix(X_test)
        y_train_arr = DataConverter.to_numeric_vector(y_train)
        y_test_arr = DataConverter.to_numeric_vector(y_test)

        baselines = {}

        for strategy in self.STRATEGIES:
            dummy = DummyRegressor(strategy=strategy)
            dummy.fit(X_train_arr, y_train_arr)
            y_pred = dummy.predict(X_test_arr)

            metrics = calculate_metrics(y_test_arr, y_pred)
            baselines[f'dummy_{strategy}'] = {
                'rmse': metrics.rmse,
                'mae': metrics.mae,
                'r2': metrics.r2
            }

        return baselines

    def get_best_baseline(self, baselines: Dict[str, Dict[str, float]]) -> Tuple[Optional[str], Dict[str, float]]:
        """
        Находит лучшую базовую модель (по R², NaN считается худшим)

        Args:
            baselines: Словарь с метриками базовых моделей

        Returns:
            (best_model_name, best_metrics)
        """
        if not baselines:
            return None, {}

        def r2_key(item):
            value = item[1].get('r2', -math.inf)
            return -math.inf if value is None or math.isnan(value) else value

        return max(baselines.items(), key=r2_key)

    def compare_with_baseline(self, model_metrics: Dict[str, float],
                              baseline_metrics: Dict[str, float]) -> Dict[str, Any]:
        """
        Сравнивает производительность модели с базовой моделью

        Args:
            model_metrics: Метрики основной модели
            baseline_metrics: Метрики базовой модели

        Returns:
            Словарь с результатами сравнения
        """
        comparison = {
            'model_metrics': model_metrics,
            'baseline_metrics': baseline_metrics,
            'improvements': {},
            'is_better_than_baseline': True
        }

        # RMSE, MAE (чем меньше, тем лучше)
        for metric in ['rmse', 'mae']:
            model_val = model_metrics.get(metric, math.inf)
            baseline_val = baseline_metrics.get(metric, math.inf)

            if baseline_val > 0 and math.isfinite(model_val) and math.isfinite(baseline_val):
                improvement = ((baseline_val - model_val) / baseline_val) * 100
                comparison['improvements'][f'{metric}_improvement'] = improvement
                comparison['improvements'][f'{metric}_better'] = model_val < baseline_val
            else:
                comparison['improvements'][f'{metric}_improvement'] = 0
                comparison['improvements'][f'{metric}_better'] = False

        # R² (чем больше, тем лучше)
        model_r2 = model_metrics.get('r2', -math.inf)
        baseline_r2 = baseline_metrics.get('r2', -math.inf)

        if math.isfinite(model_r2) and math.isfinite(baseline_r2):
            improvement = ((model_r2 - baseline_r2) / abs(baseline_r2)) * 100 if baseline_r2 != 0 else 0
            comparison['improvements']['r2_improvement'] = improvement
            comparison['improvements']['r2_better'] = model_r2 > baseline_r2
        else:
            comparison['improvements']['r2_improvement'] = 0
            comparison['improvements']['r2_better'] = False

        # Общая оценка
        better_metrics = sum([
            comparison['improvements']['rmse_better'],
            comparison['improvements']['mae_better'],
            comparison['improvements']['r2_better']
        ])
        comparison['is_better_than_baseline'] = better_metrics >= 2

        return comparison

    def create_baseline_report(self, X_train: Any, y_train: Any,
                               X_test: Any, y_test: Any) -> Dict[str, Any]:
        """
        Создает полный отчет по базовым моделям

        Args:
            X_train, y_train: Тренировочные данные
            X_test, y_test: Тестовые данные

        Returns:
            Полный отчет с базовыми моделями
        """
        baselines = self.create_regression_baselines(X_train, y_train, X_test, y_test)
        best_baseline_name, best_baseline_metrics = self.get_best_baseline(baselines)

        X_train_shape = np.shape(X_train)
        report = {
            'all_baselines': baselines,
            'best_baseline': {
                'name': best_baseline_name,
                'metrics': best_baseline_metrics
            },
            'data_info': {
                'train_samples': len(y_train),
                'test_samples': len(y_test),
                'features': X_train_shape[1] if len(X_train_shape) > 1 else 1
            }
        }

        self.logger.info("📊 Создан отчет по базовым моделям")
        self.logger.info(f"🏆 Лучшая базовая модель: {best_baseline_name}")

        return report
