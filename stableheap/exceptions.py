"""
Exception hierarchy for the stable priority queue.

Empty-queue queries are *not* errors: `peek` / `poll` return `ABSENT`.
"""


class StableHeapError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return f"{self.__class__.__name__}: {self.message}"


class ConfigurationError(StableHeapError, ValueError):
    pass


class CounterExhaustedError(StableHeapError, OverflowError):
    pass
