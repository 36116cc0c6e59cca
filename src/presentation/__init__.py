"""Presentation layer - API endpoints and HTTP concerns.

This layer contains FastAPI routers and endpoint definitions. It is thin:
it resolves the caller, dispatches commands to the application layer and
translates results to HTTP responses.

Structure:
- routers/system.py: root, health and config endpoints
- routers/api/v1/: versioned webinar endpoints and RFC 7807 errors
- routers/api/middleware/: trace middleware and caller dependency

The presentation layer depends on the application layer but contains NO
business logic.
"""
