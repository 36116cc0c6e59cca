"""Deterministic identifier generators for tests and local wiring."""

from itertools import count


class FixedIdGenerator:
    """Return the same identifier on every call.

    Args:
        value: Identifier to hand out. Defaults to "id-1".
    """

    def __init__(self, value: str = "id-1") -> None:
        self._value = value

    def generate(self) -> str:
        return self._value


class SequentialIdGenerator:
    """Return "<prefix>-1", "<prefix>-2", ... in call order.

    Useful when a test creates several webinars and needs distinct ids.
    """

    def __init__(self, prefix: str = "id") -> None:
        self._prefix = prefix
        self._counter = count(1)

    def generate(self) -> str:
        return f"{self._prefix}-{next(self._counter)}"
