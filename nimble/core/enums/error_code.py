"""Registration error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types during classification and carried by the
exceptions raised at the composition and startup boundaries.

Categories:
- Classification errors (AMBIGUOUS_*, *_UNDECLARED)
- Catalog errors (*_MISSING, *_DUPLICATE)
- Container errors (SERVICE_*)
- Binding errors (MODULES_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Registration error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Classification errors
    AMBIGUOUS_CLASSIFICATION = "ambiguous_classification"
    ENDPOINT_MODULE_UNDECLARED = "endpoint_module_undeclared"
    INVALID_MODULE_TYPE = "invalid_module_type"
    INVALID_ENDPOINT_TYPE = "invalid_endpoint_type"

    # Catalog errors
    ENDPOINT_MODULE_MISSING = "endpoint_module_missing"
    MODULE_DUPLICATE = "module_duplicate"

    # Container errors
    SERVICE_NOT_REGISTERED = "service_not_registered"
    SERVICE_DEPENDENCY_UNRESOLVED = "service_dependency_unresolved"
    SERVICE_INVALID_REGISTRATION = "service_invalid_registration"

    # Binding errors
    MODULES_ALREADY_BOUND = "modules_already_bound"
