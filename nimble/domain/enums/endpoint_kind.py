"""Roles a discovered class can play."""

from enum import Enum


class EndpointKind(str, Enum):
    """Classification verdicts produced by discovery.

    Attributes:
        MODULE: Concrete Module subclass.
        BOUND: Concrete endpoint owned by exactly one module.
        UNBOUND: Concrete root endpoint, registered on the application itself.
        IRRELEVANT: Anything else (abstract, unrelated).
    """

    MODULE = "module"
    BOUND = "bound"
    UNBOUND = "unbound"
    IRRELEVANT = "irrelevant"
