"""Test suite for the webinars service.

Test structure follows the test pyramid:
- unit/: Unit tests - handlers, entity, adapters and error mapping in isolation
- integration/: Integration tests - SQLAlchemy repository against in-memory SQLite
- api/: API endpoint tests - HTTP endpoints through TestClient
"""
