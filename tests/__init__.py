"""Test suite for the Cloud Native Days event and webhook service.

Test structure:
- unit/: Unit tests - domain logic, handlers and adapters in isolation
- api/: API endpoint tests - HTTP endpoints through TestClient

Outbound HTTP is never performed; adapters are exercised through
httpx.MockTransport and ports are replaced with mocks.
"""
