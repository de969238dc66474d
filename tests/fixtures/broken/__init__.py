"""Package with a submodule that raises on import."""
