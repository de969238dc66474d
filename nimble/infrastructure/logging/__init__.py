"""Logging adapters implementing LoggerProtocol."""

from nimble.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
