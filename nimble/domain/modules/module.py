"""Module contract.

A module is a named group of endpoints sharing routing configuration: a path
prefix, OpenAPI tags, FastAPI dependencies (auth, rate limiting), response
defaults. Every endpoint bound to a module registers against the group the
module derives, and so inherits that configuration.

Example:
    class UsersModule(Module):
        def map_group(self, parent: RouteParent) -> APIRouter:
            return APIRouter(
                prefix="/users",
                tags=["Users"],
                dependencies=[Depends(get_current_user)],
            )
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fastapi import APIRouter, FastAPI

    type RouteParent = FastAPI | APIRouter


class Module(ABC):
    """Base class for all modules.

    Concrete subclasses are discovered automatically. Abstract subclasses
    (any class with unimplemented abstract methods) are skipped, which makes
    them a convenient place for configuration shared by several modules.
    """

    @abstractmethod
    def map_group(self, parent: RouteParent) -> APIRouter:
        """Derive the route group inherited by this module's endpoints.

        Args:
            parent: The global group when one was configured, otherwise the
                application itself. Mounting the returned group on the parent
                is done by the binder once the endpoints are registered.

        Returns:
            The group every bound endpoint of this module registers on.
        """
        ...
