"""Стратегии расчёта сдачи."""

from .base import ChangeStrategy
from .greedy import GreedyStrategy
from .randomized import RandomizedStrategy

GREEDY = GreedyStrategy()
RANDOMIZED = RandomizedStrategy(GREEDY)

__all__ = [
    "ChangeStrategy",
    "GreedyStrategy",
    "RandomizedStrategy",
    "GREEDY",
    "RANDOMIZED",
]
