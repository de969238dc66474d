"""Package whose endpoints share a concrete generic base."""
