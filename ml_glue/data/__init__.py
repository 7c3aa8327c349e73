"""
📊 Data модуль - подготовка табличных данных

Преобразование pandas -> numpy и разбиение датасета на train/test.
"""

from .converter import DataConverter
from .splitter import (
    TrainTestSplit,
    split_target,
    train_test_split,
    shuffled_indices,
    compute_test_count
)

__all__ = [
    'DataConverter',
    'TrainTestSplit',
    'split_target',
    'train_test_split',
    'shuffled_indices',
    'compute_test_count'
]
