"""Response schemas for the bundled endpoints."""
