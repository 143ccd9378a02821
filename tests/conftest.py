import os
import time

os.environ.setdefault("STORE_BACKEND", "memory")
os.environ.setdefault("LOG_JSON", "false")

import pytest
import structlog
from request_recorder.handler import reset_default_handler
from request_recorder.stores.base import KeyValueStore


class FailingStore(KeyValueStore):
    """Store stub whose writes always raise the given exception."""

    name = "failing"

    def __init__(self, error: Exception):
        self.error = error
        self.calls = []

    def put(self, table, item):
        self.calls.append((table, item))
        raise self.error

    def health_check(self) -> bool:
        return False


class ContextCapturingStore(KeyValueStore):
    """Memory-like store that keeps the structlog context seen by each write."""

    name = "capturing"

    def __init__(self, delay: float = 0.0):
        self.delay = delay
        self.items = []
        self.contexts = []

    def put(self, table, item):
        self.contexts.append(structlog.contextvars.get_contextvars())
        if self.delay:
            time.sleep(self.delay)
        self.items.append(item)
        return {}

    def health_check(self) -> bool:
        return True


class FixedClock:
    """Clock returning preset epoch milliseconds in order."""

    def __init__(self, *values: int):
        self.values = list(values)

    def __call__(self) -> int:
        if len(self.values) > 1:
            return self.values.pop(0)
        return self.values[0]


@pytest.fixture(autouse=True)
def fresh_default_handler():
    reset_default_handler()
    yield
    reset_default_handler()
