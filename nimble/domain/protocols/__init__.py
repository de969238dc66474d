"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance.

Usage:
    from nimble.domain.protocols import InstanceProviderProtocol, LoggerProtocol
"""

from nimble.domain.protocols.instance_provider_protocol import (
    InstanceProviderProtocol,
)
from nimble.domain.protocols.logger_protocol import LoggerProtocol

__all__ = [
    "InstanceProviderProtocol",
    "LoggerProtocol",
]
