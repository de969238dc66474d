"""Endpoint contracts.

Two variants exist:

- Endpoint[M]: bound to module M, registers on the group M derives and
  inherits its prefix, tags and dependencies.
- RootEndpoint: ownerless, registers directly on the application and inherits
  nothing (not even the global group).

Example:
    class ListUsers(Endpoint[UsersModule]):
        def map_endpoint(self, group: APIRouter) -> None:
            group.add_api_route("", self.handle, methods=["GET"])

    class Health(RootEndpoint):
        def map_endpoint(self, app: FastAPI) -> None:
            app.add_api_route("/health", self.handle, methods=["GET"])
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable
from typing import TYPE_CHECKING, Generic, TypeVar

from nimble.domain.modules.module import Module

if TYPE_CHECKING:
    from fastapi import APIRouter, FastAPI

TModule = TypeVar("TModule", bound=Module)


class Endpoint(ABC, Generic[TModule]):
    """Endpoint owned by the module given as the generic parameter."""

    @abstractmethod
    def map_endpoint(self, group: APIRouter) -> None:
        """Register routes on the owning module's group.

        Args:
            group: Route group derived by the owning module.
        """
        ...


class RootEndpoint(ABC):
    """Endpoint registered directly on the application."""

    @abstractmethod
    def map_endpoint(self, app: FastAPI) -> None:
        """Register routes on the application.

        Args:
            app: The root application. Never a module or global group.
        """
        ...


def endpoint_contract(module: type[Module]) -> Hashable:
    """Instance-provider contract under which module's endpoints are registered.

    Args:
        module: Owning module class.

    Returns:
        The parameterised alias ``Endpoint[module]`` (hashable, equal across
        calls).
    """
    return Endpoint[module]  # type: ignore[valid-type]
