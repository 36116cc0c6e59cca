"""Application layer - Use cases and orchestration.

This layer contains the webinar use cases following the CQRS pattern:
- Commands: Write operations that change state (organize, change seats)

Structure:
- commands/: Command dataclasses and handlers (write operations)
- dtos/: Result dataclasses returned by handlers
- errors/: Application errors wrapping domain errors

The application layer enforces the webinar rules through its handlers and
depends on domain protocols only, never on concrete adapters.
"""
