"""Unit tests for class classification.

Tests cover:
- Each role (module, bound endpoint, root endpoint)
- Abstract and unrelated classes are irrelevant
- Ambiguous classes (several roles or several owners)
- Endpoints that never name their module
"""

from abc import ABC, abstractmethod

import pytest
from fastapi import APIRouter

from nimble.application.discovery import classify
from nimble.core.enums import ErrorCode
from nimble.core.errors import ClassificationError
from nimble.core.result import Failure, Success
from nimble.domain.enums import EndpointKind
from nimble.domain.modules import Endpoint, Module, RootEndpoint, TModule


class OrdersModule(Module):
    def map_group(self, parent):
        return APIRouter(prefix="/orders")


class BillingModule(Module):
    def map_group(self, parent):
        return APIRouter(prefix="/billing")


class AbstractModule(Module):
    @abstractmethod
    def prefix(self) -> str: ...

    def map_group(self, parent):
        return APIRouter(prefix=self.prefix())


class ListOrders(Endpoint[OrdersModule]):
    def map_endpoint(self, group):
        pass


class Status(RootEndpoint):
    def map_endpoint(self, app):
        pass


class OrdersPart(Endpoint[OrdersModule], ABC):
    pass


class SplitEndpoint(OrdersPart, Endpoint[BillingModule]):
    def map_endpoint(self, group):
        pass


class ModuleAndRoot(Module, RootEndpoint):
    def map_group(self, parent):
        return APIRouter()

    def map_endpoint(self, app):
        pass


class ModuleAndEndpoint(Module, Endpoint[OrdersModule]):
    def map_group(self, parent):
        return APIRouter()

    def map_endpoint(self, group):
        pass


class BoundAndRoot(Endpoint[OrdersModule], RootEndpoint):
    def map_endpoint(self, target):
        pass


class Undeclared(Endpoint):
    def map_endpoint(self, group):
        pass


class GenericBase(Endpoint[TModule]):
    def map_endpoint(self, group):
        pass


class ListFromGenericBase(GenericBase[OrdersModule]):
    pass


@pytest.mark.unit
class TestClassifyRoles:
    """Test single-role classification."""

    def test_module(self):
        """Test a concrete Module subclass is a module."""
        result = classify(OrdersModule)

        assert isinstance(result, Success)
        assert result.value.kind == EndpointKind.MODULE
        assert result.value.owner is None

    def test_bound_endpoint_carries_owner(self):
        """Test Endpoint[M] is bound with owner M."""
        result = classify(ListOrders)

        assert isinstance(result, Success)
        assert result.value.kind == EndpointKind.BOUND
        assert result.value.owner is OrdersModule

    def test_root_endpoint(self):
        """Test a RootEndpoint subclass is unbound."""
        result = classify(Status)

        assert isinstance(result, Success)
        assert result.value.kind == EndpointKind.UNBOUND

    @pytest.mark.parametrize(
        "cls",
        [
            AbstractModule,
            OrdersPart,
            GenericBase,
            Module,
            Endpoint,
            RootEndpoint,
            str,
            object,
        ],
    )
    def test_irrelevant(self, cls):
        """Test abstract and unrelated classes are irrelevant."""
        result = classify(cls)

        assert isinstance(result, Success)
        assert result.value.kind == EndpointKind.IRRELEVANT


@pytest.mark.unit
class TestClassifyFailures:
    """Test rejected classes."""

    @pytest.mark.parametrize(
        "cls", [ModuleAndRoot, ModuleAndEndpoint, BoundAndRoot, SplitEndpoint]
    )
    def test_ambiguous(self, cls):
        """Test classes matching several roles are rejected."""
        result = classify(cls)

        assert isinstance(result, Failure)
        assert isinstance(result.error, ClassificationError)
        assert result.error.code == ErrorCode.AMBIGUOUS_CLASSIFICATION
        assert result.error.type_name.endswith(cls.__qualname__)
        assert len(result.error.classifications) >= 2

    def test_two_owners_names_both(self):
        """Test an endpoint declaring two modules names both in the error."""
        result = classify(SplitEndpoint)

        assert isinstance(result, Failure)
        roles = " ".join(result.error.classifications)
        assert "OrdersModule" in roles
        assert "BillingModule" in roles

    def test_module_and_root_lists_roles(self):
        """Test the conflicting roles are reported."""
        result = classify(ModuleAndRoot)

        assert isinstance(result, Failure)
        assert result.error.classifications == ("module", "root endpoint")

    def test_undeclared_module(self):
        """Test a bare Endpoint subclass is rejected, not silently dropped."""
        result = classify(Undeclared)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.ENDPOINT_MODULE_UNDECLARED
        assert "Undeclared" in result.error.message


@pytest.mark.unit
class TestClassifyGenerics:
    """Test generic intermediate endpoint bases."""

    def test_concrete_open_generic_is_irrelevant(self):
        """Test a concrete base with unbound type variables is skipped."""
        result = classify(GenericBase)

        assert isinstance(result, Success)
        assert result.value.kind == EndpointKind.IRRELEVANT

    def test_parameterisation_of_generic_base_is_bound(self):
        """Test GenericBase[M] subclasses are bound to M."""
        result = classify(ListFromGenericBase)

        assert isinstance(result, Success)
        assert result.value.kind == EndpointKind.BOUND
        assert result.value.owner is OrdersModule
