"""InstanceProviderProtocol: how discovered classes become live instances.

Discovery only knows classes. The binder asks an instance provider for
instances keyed by contract:

    Module          -> every discovered module class
    Endpoint[M]     -> the endpoint classes owned by module M
    RootEndpoint    -> every unbound endpoint class

Contracts are any hashable key, so the parameterised alias Endpoint[M] works
as a key in its own right.

Ordering contract: resolve_all returns instances in registration order.
"""

from collections.abc import Hashable
from typing import Any, Protocol

from nimble.domain.enums import ServiceLifetime


class InstanceProviderProtocol(Protocol):
    """Protocol for the dependency-injection collaborator."""

    def register(
        self,
        contract: Hashable,
        concrete: type,
        lifetime: ServiceLifetime = ServiceLifetime.TRANSIENT,
    ) -> None:
        """Register a concrete class under a contract.

        Args:
            contract: Lookup key (a class or a parameterised generic alias).
            concrete: Class instantiated on resolution.
            lifetime: Instance lifetime (transient by default).
        """
        ...

    def resolve_all(self, contract: Hashable) -> list[Any]:
        """Build one instance per registration of a contract.

        Args:
            contract: Lookup key.

        Returns:
            Instances in registration order. Empty when nothing is registered.

        Raises:
            ServiceResolutionError: If an instance cannot be constructed.
        """
        ...
