"""API tests package.

End-to-end tests for REST API endpoints using TestClient.
Tests the complete request/response cycle including:
- Request validation
- Handler orchestration
- Problem Details error bodies and HTTP status codes

Note:
    Most API tests override the handler factories with in-memory
    repositories; one test runs the full stack through the lifespan.
"""
