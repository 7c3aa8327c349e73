#!/usr/bin/env python3
"""
🧩 Базовый интерфейс моделей
"""

from abc import ABC, abstractmethod
from typing import Any

import numpy as np

class BaseModel(ABC):
    """
    Общий интерфейс для всех моделей ml_glue

    fit() обучает модель и возвращает неизменяемый снимок обученного состояния,
    predict() и summary() работают с последним снимком.
    """

    @abstractmethod
    def fit(self, X: Any, y: Any) -> Any:
        """Обучить модель на признаках X и таргете y"""
        pass

    @abstractmethod
    def predict(self, X: Any) -> np.ndarray:
        """Предсказания для признаков X"""
        pass

    @abstractmethod
    def summary(self) -> str:
        """Текстовое описание модели и её параметров"""
        pass

    @property
    @abstractmethod
    def is_fitted(self) -> bool:
        """Обучена ли модель"""
        pass
