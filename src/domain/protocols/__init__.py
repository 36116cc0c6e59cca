"""Domain protocols (ports) package.

Protocol definitions the domain and application layers depend on.
Infrastructure adapters implement these protocols without inheritance.

Usage:
    from src.domain.protocols import WebinarRepository, IdGeneratorProtocol
"""

from src.domain.protocols.date_generator_protocol import DateGeneratorProtocol
from src.domain.protocols.id_generator_protocol import IdGeneratorProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.webinar_repository import WebinarRepository

__all__ = [
    # Service protocols
    "DateGeneratorProtocol",
    "IdGeneratorProtocol",
    "LoggerProtocol",
    # Repository protocols
    "WebinarRepository",
]
