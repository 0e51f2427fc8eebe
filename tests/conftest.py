from typing import Callable
from typing import List

import pytest


class Flaky:
    """Callable raising on its first ``failures`` calls, then returning ``value``."""

    def __init__(self, failures: int, value: object = "ok") -> None:
        self.failures = failures
        self.value = value
        self.calls = 0

    def __call__(self, *args: object, **kwargs: object) -> object:
        self.calls += 1
        if self.calls <= self.failures:
            raise RuntimeError(f"failure #{self.calls}")
        return self.value


@pytest.fixture()
def log_lines() -> List[str]:
    # Collects lines passed to a logger sink via ``log_lines.append``
    return []


@pytest.fixture()
def make_flaky() -> Callable[..., Flaky]:
    def _make(failures: int, value: object = "ok") -> Flaky:
        return Flaky(failures, value)

    return _make


@pytest.fixture()
def counting():
    """Unary function counting its own invocations in ``counting.calls``."""

    def _counting(x):
        _counting.calls += 1
        return (x, _counting.calls)

    _counting.calls = 0
    return _counting
