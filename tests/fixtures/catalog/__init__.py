"""Well-formed sample application used by discovery and binding tests."""
