"""API tests package.

End-to-end tests for the bundled routes using TestClient.
"""
