"""Reading module ownership from endpoint class declarations."""

from typing import get_args, get_origin

from nimble.domain.modules.endpoint import Endpoint
from nimble.domain.modules.module import Module


def qualified_name(cls: type) -> str:
    """Fully qualified class name, used for ordering and log output."""
    return f"{cls.__module__}.{cls.__qualname__}"


def declared_modules(cls: type) -> tuple[type[Module], ...]:
    """Module classes named as Endpoint parameters anywhere in the MRO.

    Reads ``__orig_bases__`` of every class in the MRO, so intermediate
    generic bases (``class CrudEndpoint(Endpoint[TModule])``) resolve through
    their concrete parameterisation. Type variables are ignored.

    Args:
        cls: Class to inspect.

    Returns:
        Distinct module classes in MRO order.
    """
    owners: list[type[Module]] = []
    for klass in cls.__mro__:
        for base in klass.__dict__.get("__orig_bases__", ()):
            origin = get_origin(base)
            if not (isinstance(origin, type) and issubclass(origin, Endpoint)):
                continue
            for arg in get_args(base):
                if (
                    isinstance(arg, type)
                    and issubclass(arg, Module)
                    and arg not in owners
                ):
                    owners.append(arg)
    return tuple(owners)
