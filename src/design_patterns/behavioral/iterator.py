"""Iterator - a Fibonacci range walked by a dedicated iterator object."""

from typing import Iterator

DEFAULT_LIMIT = 100


class FibonacciIterator(Iterator[int]):
    """Yields Fibonacci numbers strictly below ``limit``."""

    def __init__(self, limit: int = DEFAULT_LIMIT):
        self._limit = limit
        self._a = 0
        self._b = 1

    def __iter__(self) -> "FibonacciIterator":
        return self

    def __next__(self) -> int:
        if self._a >= self._limit:
            raise StopIteration
        current = self._a
        self._a, self._b = self._b, self._a + self._b
        return current


class FibonacciRange:
    """Iterable; every ``iter()`` starts a fresh sequence."""

    def __init__(self, limit: int = DEFAULT_LIMIT):
        self.limit = limit

    def __iter__(self) -> FibonacciIterator:
        return FibonacciIterator(self.limit)
