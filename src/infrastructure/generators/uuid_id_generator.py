"""UUIDv7 identifier generator.

Time-ordered UUIDs keep webinar primary keys roughly insertion-ordered, which
plays well with B-tree indexes.
"""

from uuid_extensions import uuid7


class UuidIdGenerator:
    """Generate identifiers as UUIDv7 strings.

    Implements IdGeneratorProtocol (structural typing, no inheritance).

    Example:
        >>> generator = UuidIdGenerator()
        >>> generator.generate()
        '01933b9c-7a9e-7c3e-8b1d-5f0e2a4c6d8e'
    """

    def generate(self) -> str:
        """Return a new UUIDv7 in canonical string form."""
        return str(uuid7())
