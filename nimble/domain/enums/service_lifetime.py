"""Service lifetimes understood by the instance provider."""

from enum import Enum


class ServiceLifetime(str, Enum):
    """How long a resolved instance lives.

    Attributes:
        TRANSIENT: A new instance on every resolution.
        SINGLETON: One instance per container, created on first resolution.
    """

    TRANSIENT = "transient"
    SINGLETON = "singleton"
