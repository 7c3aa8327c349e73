"""
📈 Systems модуль - готовые пайплайны экспериментов
"""

from .regression_system import RegressionSystem, ExperimentResult

__all__ = [
    'RegressionSystem',
    'ExperimentResult'
]
