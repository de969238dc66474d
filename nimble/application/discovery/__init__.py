"""Discovery: classify classes into modules, bound and root endpoints."""

from nimble.application.discovery.classifier import Classification, classify
from nimble.application.discovery.discovery import discover, discover_packages
from nimble.application.discovery.scanner import collect_types

__all__ = [
    "Classification",
    "classify",
    "collect_types",
    "discover",
    "discover_packages",
]
