"""Identifier and clock adapters.

Implementations of IdGeneratorProtocol and DateGeneratorProtocol. Production
wiring uses the UUID and system-clock adapters; tests use the fixed ones.

Exports:
    UuidIdGenerator: UUIDv7 identifiers
    FixedIdGenerator: Always the same identifier
    SequentialIdGenerator: Predictable id-1, id-2, ... identifiers
    SystemDateGenerator: Current UTC time
    FixedDateGenerator: Frozen instant
"""

from src.infrastructure.generators.fixed_date_generator import (
    DEFAULT_FIXED_NOW,
    FixedDateGenerator,
)
from src.infrastructure.generators.fixed_id_generator import (
    FixedIdGenerator,
    SequentialIdGenerator,
)
from src.infrastructure.generators.system_date_generator import SystemDateGenerator
from src.infrastructure.generators.uuid_id_generator import UuidIdGenerator

__all__ = [
    "DEFAULT_FIXED_NOW",
    "FixedDateGenerator",
    "FixedIdGenerator",
    "SequentialIdGenerator",
    "SystemDateGenerator",
    "UuidIdGenerator",
]
