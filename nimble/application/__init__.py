"""Application layer: discovery and the module registry."""
