"""Strategy - interchangeable in-place sorting algorithms behind a ``Sorter``."""

from abc import ABC, abstractmethod
from typing import List, Optional

from design_patterns.infrastructure.logging.logger import get_logger
from design_patterns.infrastructure.output import OutputSink, resolve_sink


class SortStrategy(ABC):
    @abstractmethod
    def sort(self, data: List[int]) -> None:
        """Sort ``data`` ascending, in place."""
        pass


class BubbleSort(SortStrategy):
    """Adjacent-swap passes. Stable."""

    def sort(self, data: List[int]) -> None:
        n = len(data)
        for i in range(n):
            swapped = False
            for j in range(n - i - 1):
                if data[j] > data[j + 1]:
                    data[j], data[j + 1] = data[j + 1], data[j]
                    swapped = True
            if not swapped:
                break


class QuickSort(SortStrategy):
    """Hoare partition around the middle element. Not stable."""

    def sort(self, data: List[int]) -> None:
        if data:
            self._quick_sort(data, 0, len(data) - 1)

    def _quick_sort(self, a: List[int], left: int, right: int) -> None:
        if left >= right:
            return
        pivot = a[(left + right) // 2]
        i, j = left, right
        while i <= j:
            while a[i] < pivot:
                i += 1
            while a[j] > pivot:
                j -= 1
            if i <= j:
                a[i], a[j] = a[j], a[i]
                i += 1
                j -= 1
        self._quick_sort(a, left, j)
        self._quick_sort(a, i, right)


class Sorter:
    """Context holding a replaceable sorting strategy."""

    def __init__(self, strategy: Optional[SortStrategy] = None, output: Optional[OutputSink] = None):
        self._strategy = strategy
        self._output = resolve_sink(output)
        self._logger = get_logger(__name__)

    @property
    def strategy(self) -> Optional[SortStrategy]:
        return self._strategy

    def set_strategy(self, strategy: SortStrategy) -> None:
        self._strategy = strategy

    def sort(self, data: List[int]) -> List[int]:
        """Emit the sequence, sort it in place with the active strategy, emit the result."""
        self._output.emit("Before sorting:")
        self._output.emit(" ".join(str(item) for item in data))
        if self._strategy is not None:
            self._logger.debug("Sorting", strategy=type(self._strategy).__name__, size=len(data))
            self._strategy.sort(data)
        self._output.emit("After sorting:")
        self._output.emit(" ".join(str(item) for item in data))
        return data
