"""Tests for constant baselines."""
import math

import numpy as np
import pandas as pd
import pytest

from ml_glue.core import BaselineModels


@pytest.fixture
def baselines():
    return BaselineModels()


@pytest.fixture
def data():
    X_train = pd.DataFrame({'x': [1.0, 2.0, 3.0, 4.0]})
    y_train = pd.Series([1.0, 2.0, 3.0, 10.0])
    X_test = pd.DataFrame({'x': [5.0, 6.0]})
    y_test = pd.Series([3.0, 5.0])
    return X_train, y_train, X_test, y_test


class TestRegressionBaselines:
    def test_strategies(self, baselines, data):
        result = baselines.create_regression_baselines(*data)
        assert set(result) == {'dummy_mean', 'dummy_median'}
        for metrics in result.values():
            assert set(metrics) == {'rmse', 'mae', 'r2'}

    def test_mean_and_median_predictions(self, baselines, data):
        result = baselines.create_regression_baselines(*data)
        # mean(y_train) = 4.0, median(y_train) = 2.5
        assert result['dummy_mean']['mae'] == pytest.approx(1.0)
        assert result['dummy_median']['mae'] == pytest.approx(1.5)

    def test_best_baseline_by_r2(self, baselines, data):
        result = baselines.create_regression_baselines(*data)
        name, metrics = baselines.get_best_baseline(result)
        assert name == 'dummy_mean'
        assert metrics is result['dummy_mean']

    def test_best_baseline_skips_nan(self, baselines):
        name, _ = baselines.get_best_baseline({
            'a': {'r2': float('nan')},
            'b': {'r2': -2.0},
        })
        assert name == 'b'

    def test_best_baseline_of_nothing(self, baselines):
        assert baselines.get_best_baseline({}) == (None, {})


class TestCompareWithBaseline:
    def test_better_model(self, baselines):
        comparison = baselines.compare_with_baseline(
            {'rmse': 1.0, 'mae': 0.8, 'r2': 0.9},
            {'rmse': 2.0, 'mae': 1.6, 'r2': 0.1},
        )
        improvements = comparison['improvements']
        assert improvements['rmse_improvement'] == pytest.approx(50.0)
        assert improvements['mae_better'] is True
        assert improvements['r2_better'] is True
        assert comparison['is_better_than_baseline'] is True

    def test_worse_model(self, baselines):
        comparison = baselines.compare_with_baseline(
            {'rmse': 3.0, 'mae': 2.0, 'r2': -0.5},
            {'rmse': 2.0, 'mae': 1.6, 'r2': 0.1},
        )
        assert comparison['is_better_than_baseline'] is False

    def test_undefined_r2_is_not_an_improvement(self, baselines):
        comparison = baselines.compare_with_baseline(
            {'rmse': 1.0, 'mae': 1.0, 'r2': float('nan')},
            {'rmse': 1.0, 'mae': 1.0, 'r2': float('nan')},
        )
        assert comparison['improvements']['r2_better'] is False
        assert comparison['improvements']['r2_improvement'] == 0


class TestBaselineReport:
    def test_report(self, baselines, data):
        report = baselines.create_baseline_report(*data)
        assert report['best_baseline']['name'] in ('dummy_mean', 'dummy_median')
        assert report['data_info'] == {'train_samples': 4, 'test_samples': 2, 'features': 1}
        assert not math.isnan(report['all_baselines']['dummy_mean']['rmse'])

    def test_report_on_arrays(self, baselines):
        report = baselines.create_baseline_report(
            np.ones((5, 3)), np.arange(5.0), np.ones((2, 3)), np.array([1.0, 2.0])
        )
        assert report['data_info']['features'] == 3
