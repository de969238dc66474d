from fastapi import APIRouter

from nimble.domain.modules import Endpoint, Module, TModule


class UsersModule(Module):
    def map_group(self, parent):
        return APIRouter(prefix="/users")


class CrudEndpoint(Endpoint[TModule]):
    """Concrete but still generic; only its parameterisations are endpoints."""

    path = ""

    def map_endpoint(self, group: APIRouter) -> None:
        group.add_api_route(self.path, self.handle, methods=["GET"])

    async def handle(self) -> dict:
        return {"endpoint": type(self).__name__}


class ListUsers(CrudEndpoint[UsersModule]):
    pass
