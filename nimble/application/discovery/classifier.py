"""Classification of a single class into a registration role.

A class is classified by three capability predicates:

    module    concrete subclass of Module
    bound     concrete subclass of Endpoint[M] for one module class M
    unbound   concrete subclass of RootEndpoint

Abstract classes, open generics (classes with unbound type variables such
as `class CrudEndpoint(Endpoint[TModule])`), and classes matching none of
the predicates are IRRELEVANT. A class matching more than one predicate, or
declaring more than one owning module, is rejected as ambiguous. A concrete
Endpoint subclass without a module parameter is rejected as undeclared.
"""

import inspect
from dataclasses import dataclass

from nimble.core.enums import ErrorCode
from nimble.core.errors import ClassificationError
from nimble.core.result import Failure, Result, Success
from nimble.domain.enums import EndpointKind
from nimble.domain.modules import (
    Endpoint,
    Module,
    RootEndpoint,
    declared_modules,
    qualified_name,
)


@dataclass(frozen=True, slots=True, kw_only=True)
class Classification:
    """Verdict for one class.

    Attributes:
        kind: Role the class plays.
        owner: Owning module class (BOUND only).
    """

    kind: EndpointKind
    owner: type[Module] | None = None


IRRELEVANT = Classification(kind=EndpointKind.IRRELEVANT)


def classify(cls: type) -> Result[Classification, ClassificationError]:
    """Classify a class into exactly one role.

    Args:
        cls: Candidate class from the scanned universe.

    Returns:
        Success with the Classification, or Failure naming the conflicting
        roles.
    """
    is_module = issubclass(cls, Module)
    is_bound = issubclass(cls, Endpoint)
    is_unbound = issubclass(cls, RootEndpoint)

    if not (is_module or is_bound or is_unbound) or inspect.isabstract(cls):
        return Success(value=IRRELEVANT)
    if getattr(cls, "__parameters__", ()):
        return Success(value=IRRELEVANT)

    owners = declared_modules(cls) if is_bound else ()

    roles: list[str] = []
    if is_module:
        roles.append("module")
    if is_bound:
        if owners:
            roles.extend(f"endpoint of {qualified_name(owner)}" for owner in owners)
        else:
            roles.append("endpoint without module")
    if is_unbound:
        roles.append("root endpoint")

    name = qualified_name(cls)
    if len(roles) > 1:
        return Failure(
            error=ClassificationError(
                code=ErrorCode.AMBIGUOUS_CLASSIFICATION,
                message=f"{name} matches conflicting roles: {', '.join(roles)}",
                type_name=name,
                classifications=tuple(roles),
            )
        )

    if is_module:
        return Success(value=Classification(kind=EndpointKind.MODULE))
    if is_unbound:
        return Success(value=Classification(kind=EndpointKind.UNBOUND))
    if not owners:
        return Failure(
            error=ClassificationError(
                code=ErrorCode.ENDPOINT_MODULE_UNDECLARED,
                message=(
                    f"{name} subclasses Endpoint without a module parameter; "
                    "use Endpoint[SomeModule] or RootEndpoint"
                ),
                type_name=name,
                classifications=tuple(roles),
            )
        )
    return Success(value=Classification(kind=EndpointKind.BOUND, owner=owners[0]))
