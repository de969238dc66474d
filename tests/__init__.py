"""Test suite for Nimble.

Test structure follows the test pyramid:
- unit/: Unit tests - discovery, catalog, container and binder in isolation
- integration/: Integration tests - discovery through binding on a real app
- api/: API endpoint tests - bundled routes over HTTP
- fixtures/: Importable packages scanned by discovery tests
"""
