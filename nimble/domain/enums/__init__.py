"""Domain enums.

Available Enums:
    - BindingPhase: Binder state machine phases
    - EndpointKind: Classification verdicts from discovery
    - ServiceLifetime: Instance provider lifetimes
"""

from nimble.domain.enums.binding_phase import BindingPhase
from nimble.domain.enums.endpoint_kind import EndpointKind
from nimble.domain.enums.service_lifetime import ServiceLifetime

__all__ = [
    "BindingPhase",
    "EndpointKind",
    "ServiceLifetime",
]
