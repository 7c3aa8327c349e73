"""Tests for the end-to-end regression experiment."""
import logging

import numpy as np
import pandas as pd
import pytest

from ml_glue import (
    ColumnNotFoundError,
    Config,
    ExperimentResult,
    InvalidArgumentError,
    RegressionSystem,
)
from ml_glue.utils.config import QUIET_CONFIG, SplitConfig
from ml_glue.utils.logger import get_logger


@pytest.fixture
def df():
    rng = np.random.default_rng(0)
    n = 50
    x1 = rng.uniform(0, 10, n)
    x2 = rng.uniform(-5, 5, n)
    y = 3.0 + 2.0 * x1 - 1.5 * x2 + rng.normal(0, 0.5, n)
    return pd.DataFrame({'x1': x1, 'x2': x2, 'y': y})


@pytest.fixture
def system():
    return RegressionSystem(Config(log_level='WARNING'))


class TestRunExperiment:
    def test_full_experiment(self, system, df):
        experiment = system.run_experiment(df, 'y', test_size=0.3, random_state=1)

        assert isinstance(experiment, ExperimentResult)
        assert experiment.split.train_size == 35
        assert experiment.split.test_size == 15
        assert experiment.result.feature_names == ('x1', 'x2')
        assert experiment.result.intercept == pytest.approx(3.0, abs=0.5)
        np.testing.assert_allclose(experiment.result.coefficients, [2.0, -1.5], atol=0.2)

        assert experiment.train_metrics.n_samples == 35
        assert experiment.test_metrics.n_samples == 15
        assert experiment.test_metrics.r2 > 0.9
        assert experiment.baseline['comparison']['is_better_than_baseline'] is True
        assert experiment.summary == experiment.model.summary()

    def test_defaults_come_from_config(self, df):
        system = RegressionSystem(Config(log_level='WARNING', split=SplitConfig(test_size=0.2, random_state=7)))
        experiment = system.run_experiment(df, 'y')
        assert experiment.split.test_size == 10

        again = system.run_experiment(df, 'y')
        assert np.array_equal(experiment.split.test_indices, again.split.test_indices)

    def test_empty_test_partition(self, system, df):
        experiment = system.run_experiment(df, 'y', test_size=0.0)
        assert experiment.split.test_size == 0
        assert experiment.test_metrics is None
        assert experiment.baseline is None

    def test_to_dict(self, system, df):
        info = system.run_experiment(df, 'y', test_size=0.3).to_dict()
        assert info['train_size'] == 35
        assert info['test_size'] == 15
        assert set(info['model']['coefficients']) == {'x1', 'x2'}
        assert info['test_metrics']['n_samples'] == 15

    def test_unknown_target(self, system, df):
        with pytest.raises(ColumnNotFoundError):
            system.run_experiment(df, 'missing')

    def test_not_a_dataframe(self, system):
        with pytest.raises(InvalidArgumentError):
            system.run_experiment([[1, 2], [3, 4]], 'y')

    def test_invalid_test_size(self, system, df):
        with pytest.raises(InvalidArgumentError):
            system.run_experiment(df, 'y', test_size=1.5)


class TestSystemInfo:
    def test_info(self, system):
        info = system.get_system_info()
        assert info['system'] == 'RegressionSystem'
        assert info['config']['log_level'] == 'WARNING'
        assert info['config']['split'] == {'test_size': 0.2, 'random_state': 42}


class TestLogLevel:
    def test_config_level_reaches_library_logger(self):
        library_logger = get_logger().logger

        RegressionSystem(QUIET_CONFIG)
        assert not library_logger.isEnabledFor(logging.INFO)
        assert library_logger.isEnabledFor(logging.WARNING)

        RegressionSystem(Config(log_level='DEBUG'))
        assert library_logger.isEnabledFor(logging.DEBUG)

        RegressionSystem(Config())
        assert library_logger.level == logging.INFO
