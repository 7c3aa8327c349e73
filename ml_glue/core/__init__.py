"""
🏗️ Core модуль - базовые компоненты ML системы

Содержит базовую систему пайплайна и базовые модели для сравнения.
"""

from .base_system import BaseSystem
from .baseline import BaselineModels

__all__ = [
    'BaseSystem',
    'BaselineModels'
]
