"""Sample endpoints for the catalog fixture."""

from abc import ABC, abstractmethod

from fastapi import APIRouter, FastAPI

from nimble.domain.modules import Endpoint, RootEndpoint, TModule
from tests.fixtures.catalog.modules import OrdersModule, ReportsModule


class ReadEndpoint(Endpoint[TModule], ABC):
    """Generic base; concrete subclasses supply the module."""

    path = ""

    @abstractmethod
    async def handle(self) -> dict: ...

    def map_endpoint(self, group: APIRouter) -> None:
        group.add_api_route(self.path, self.handle, methods=["GET"])


class ListOrders(ReadEndpoint[OrdersModule]):
    async def handle(self) -> dict:
        return {"orders": []}


class GetOrder(Endpoint[OrdersModule]):
    def map_endpoint(self, group: APIRouter) -> None:
        group.add_api_route("/{order_id}", self.get_order, methods=["GET"])

    async def get_order(self, order_id: int) -> dict:
        return {"order_id": order_id}


class MonthlyReport(Endpoint[ReportsModule]):
    def map_endpoint(self, group: APIRouter) -> None:
        group.add_api_route("/monthly", self.handle, methods=["GET"])

    async def handle(self) -> dict:
        return {"report": "monthly"}


class Ping(RootEndpoint):
    def map_endpoint(self, app: FastAPI) -> None:
        app.add_api_route("/ping", self.ping, methods=["GET"])

    async def ping(self) -> dict:
        return {"pong": True}
