#!/usr/bin/env python3
"""
📈 RegressionSystem - полный эксперимент по линейной регрессии
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

import pandas as pd

from ..core.base_system import BaseSystem
from ..core.baseline import BaselineModels
from ..data.splitter import TrainTestSplit
from ..evaluation.metrics import RegressionMetrics
from ..models.linear_regression import LinearRegression, LinearRegressionResult
from ..utils.config import Config

@dataclass(frozen=True)
class ExperimentResult:
    """Результаты эксперимента"""
    model: LinearRegression
    result: LinearRegressionResult
    split: TrainTestSplit
    train_metrics: RegressionMetrics
    test_metrics: Optional[RegressionMetrics]
    baseline: Optional[Dict[str, Any]]
    summary: str

    def to_dict(self) -> Dict[str, Any]:
        """Метаданные эксперимента"""
        return {
            'model': self.result.to_dict(),
            'train_size': self.split.train_size,
            'test_size': self.split.test_size,
            'train_metrics': self.train_metrics.to_dict(),
            'test_metrics': self.test_metrics.to_dict() if self.test_metrics is not None else None,
            'baseline': self.baseline
        }

class RegressionSystem(BaseSystem):
    """
    Система для обучения и оценки линейной регрессии
    """
    def __init__(self, config: Optional[Config] = None):
        super().__init__(config)
        self.baselines = BaselineModels()
        self.logger.info("📈 RegressionSystem инициализирована")

    def run_experiment(self, df: pd.DataFrame, target_column: str,
                       test_size: Optional[float] = None,
                       random_state: Optional[int] = None) -> ExperimentResult:
        """
        Запуск полного эксперимента по регрессии

        Args:
            df: DataFrame с признаками и таргетом
            target_column: Имя целевой колонки
            test_size: Доля теста (по умолчанию из config.split)
            random_state: Seed (по умолчанию из config.split)

        Returns:
            ExperimentResult
        """
        self.logger.info(f"🚀 Запуск эксперимента регрессии для таргета '{target_column}'")

        try:
            # 1. Отделение таргета
            self.logger.info("🎯 Шаг 1: Отделение таргета...")
            X, y = self.prepare_data(df, target_column)

            # 2. Разбиение на train/test
            self.logger.info("✂️ Шаг 2: Разбиение на train/test...")
            split = self.split_data(X, y, test_size=test_size, random_state=random_state)

            # 3. Обучение модели
            self.logger.info("🤖 Шаг 3: Обучение модели...")
            model, result = self.train_model(split.X_train, split.y_train)

            # 4. Оценка
            self.logger.info("📊 Шаг 4: Оценка модели...")
            train_metrics = self.evaluate_model(model, split.X_train, split.y_train, 'Метрики на train')

            test_metrics = None
            baseline = None
            if split.test_size > 0:
                test_metrics = self.evaluate_model(model, split.X_test, split.y_test, 'Метрики на test')

                # 5. Сравнение с базовыми моделями
                self.logger.info("🏆 Шаг 5: Сравнение с базовыми моделями...")
                report = self.baselines.create_baseline_report(
                    split.X_train, split.y_train, split.X_test, split.y_test
                )
                comparison = self.baselines.compare_with_baseline(
                    test_metrics.to_dict(), report['best_baseline']['metrics']
                )
                baseline = {
                    'best_baseline': report['best_baseline'],
                    'comparison': comparison
                }
            else:
                self.logger.warning("Тестовая выборка пустая: оценка на test пропущена")

            self.logger.info("✅ Эксперимент завершен успешно")
            return ExperimentResult(
                model=model,
                result=result,
                split=split,
                train_metrics=train_metrics,
                test_metrics=test_metrics,
                baseline=baseline,
                summary=result.summary()
            )

        except Exception as e:
            self.logger.error(f"Ошибка в эксперименте для таргета '{target_column}': {e}")
            raise
