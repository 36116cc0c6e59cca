"""Infrastructure layer - Adapters and external integrations.

This layer contains implementations of domain protocols (ports):
- Webinar repositories (SQLAlchemy and in-memory)
- Identifier and clock generators
- Structured logging

Structure:
- persistence/: Database engine, models and repositories
- generators/: Id and date generator adapters
- logging/: structlog console adapter

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
