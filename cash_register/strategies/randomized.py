"""
Randomized — Стратегия со случайным порядком номиналов

Базовый список номиналов разрешается так же, как в Greedy, затем
перемешивается локальным random.Random и передаётся в жадное разложение.

Глобальное состояние модуля random не используется:
- seed задан → random.Random(seed), перестановка воспроизводима
- seed не задан → random.Random() с энтропией ОС
"""

import random
from typing import List, Optional, Sequence

from cash_register.core.domain.change import ChangeItem
from cash_register.core.domain.currency import Denomination, resolve_denominations
from cash_register.options import ChangeOptions
from cash_register.strategies.base import ChangeStrategy
from cash_register.strategies.greedy import GreedyStrategy


class RandomizedStrategy(ChangeStrategy):
    """Жадное разложение по перемешанному набору номиналов."""

    name = "randomized"

    def __init__(self, greedy: Optional[GreedyStrategy] = None):
        self._greedy = greedy or GreedyStrategy()

    def _calculate(self, change_amount: int, options: ChangeOptions) -> List[ChangeItem]:
        shuffled = self.shuffle(resolve_denominations(options), options.random_seed)
        return self._greedy.reduce(change_amount, shuffled)

    @staticmethod
    def shuffle(
        denominations: Sequence[Denomination],
        seed: Optional[int] = None,
    ) -> List[Denomination]:
        """
        Равномерно случайная перестановка копии списка номиналов.

        Args:
            denominations: Исходные номиналы (не изменяются)
            seed: Seed для воспроизводимости (None = энтропия ОС)

        Returns:
            Новый список номиналов
        """
        rng = random.Random(seed)
        shuffled = list(denominations)
        rng.shuffle(shuffled)
        return shuffled
