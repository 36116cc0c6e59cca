"""IdGeneratorProtocol - source of new entity identifiers.

Injected into handlers so tests can use deterministic identifiers while
production uses unpredictable ones.
"""

from typing import Protocol


class IdGeneratorProtocol(Protocol):
    """Protocol for identifier generation."""

    def generate(self) -> str:
        """Return a new unique identifier.

        Returns:
            Identifier string. Never fails.
        """
        ...
