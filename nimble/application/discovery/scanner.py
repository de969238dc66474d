"""Package scanning - builds the class universe discovery works on.

Every configured package is imported along with all of its submodules
(pkgutil.walk_packages). Classes are collected from the module that defines
them, so a class re-exported from several modules is seen once.

Import errors are not swallowed: a module that fails to import would
silently drop its routes otherwise.
"""

import importlib
import inspect
import pkgutil
from collections.abc import Iterable, Iterator
from types import ModuleType


def _reraise(name: str) -> None:
    raise


def iter_package_modules(package_name: str) -> Iterator[ModuleType]:
    """Import a package and yield it with every submodule.

    Args:
        package_name: Dotted package (or plain module) name.

    Yields:
        Imported modules, package first, submodules in pkgutil order.
    """
    package = importlib.import_module(package_name)
    yield package

    path = getattr(package, "__path__", None)
    if path is None:
        return

    for info in pkgutil.walk_packages(
        path, prefix=f"{package.__name__}.", onerror=_reraise
    ):
        yield importlib.import_module(info.name)


def classes_defined_in(module: ModuleType) -> list[type]:
    """Top-level classes whose defining module is ``module``."""
    return [
        obj
        for _, obj in inspect.getmembers(module, inspect.isclass)
        if obj.__module__ == module.__name__
    ]


def collect_types(packages: Iterable[str]) -> list[type]:
    """Collect the class universe of several packages.

    Args:
        packages: Dotted package names.

    Returns:
        Distinct classes in scan order.
    """
    seen: dict[type, None] = {}
    for package_name in packages:
        for module in iter_package_modules(package_name):
            for cls in classes_defined_in(module):
                seen.setdefault(cls, None)
    return list(seen)
