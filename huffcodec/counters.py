#counters.py

from typing import Any, Iterable, Optional

from .logger import Logger, FrequencyCountLog
from .models import FrequencyTable


class FrequencyCounter:
    """
    Tabulates how often each symbol occurs in an input sequence.
    """

    def __init__(self, logger: Optional[Logger] = None) -> None:
        self.logger: Optional[Logger] = logger

    def count(self, symbols: Iterable[Any]) -> FrequencyTable:
        frequencies = FrequencyTable()
        for symbol in symbols:
            frequencies.increment(symbol)
        if self.logger is not None:
            self.logger.log(FrequencyCountLog(len(frequencies), frequencies.total()))
        return frequencies
