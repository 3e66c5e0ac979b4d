import logging
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from utils import counts_to_cumulative_ascending

logger = logging.getLogger(__name__)

EOF_SYMBOL = 256
TOTAL_SYMBOLS = 257

FREQUENCY_BITS = 14
# adaptation stops once the total reaches this
MAX_FREQUENCY = (1 << FREQUENCY_BITS) - 1


@dataclass(frozen=True)
class Probability:
    """Half-open cumulative interval [low, high) of one symbol."""
    low: int
    high: int


class FrequencyModel:
    """
    Adaptive order-0 model over 256 byte values plus the end-of-stream symbol.

    The table holds cumulative counts: table[0] == 0, table[TOTAL_SYMBOLS] is
    the total, and symbol s owns [table[s], table[s + 1]). Every lookup bumps
    the looked-up symbol by one until the total reaches MAX_FREQUENCY, after
    which the model is frozen for good.
    """

    def __init__(self):
        self._table = np.zeros(TOTAL_SYMBOLS + 1, dtype=np.int64)
        self.frozen = False
        self.reset()

    def reset(self) -> None:
        # uniform prior: every symbol starts with weight 1
        self._table[:] = counts_to_cumulative_ascending([1] * TOTAL_SYMBOLS)
        self.frozen = False

    @property
    def total(self) -> int:
        return int(self._table[TOTAL_SYMBOLS])

    @property
    def table(self) -> np.ndarray:
        view = self._table.copy()
        view.flags.writeable = False
        return view

    def _update(self, symbol: int) -> None:
        self._table[symbol + 1:] += 1
        if self.total >= MAX_FREQUENCY:
            self.frozen = True
            logger.debug("frequency model frozen at total=%d", self.total)

    def _interval(self, symbol: int) -> Tuple[Probability, int]:
        prob = Probability(int(self._table[symbol]), int(self._table[symbol + 1]))
        total = self.total
        if not self.frozen:
            self._update(symbol)
        return prob, total

    def probability_for_symbol(self, symbol: int) -> Tuple[Probability, int]:
        """Interval and total for `symbol`, taken before the adaptive update."""
        if not 0 <= symbol <= EOF_SYMBOL:
            raise ValueError(f"symbol out of range: {symbol}")
        return self._interval(symbol)

    def symbol_for_offset(self, offset: int) -> Tuple[Probability, int, int]:
        """Resolve a cumulative offset in [0, total) to (interval, total, symbol)."""
        if not 0 <= offset < self.total:
            raise ValueError(f"offset {offset} outside [0, {self.total})")
        symbol = int(np.searchsorted(self._table, offset, side="right")) - 1
        prob, total = self._interval(symbol)
        return prob, total, symbol
