"""Resource registry.

To add a built-in resource:
    1) Create a new module file in this package.
    2) Define the resource class and `SPEC = ResourceSpec.of(Model)`.

The registry auto-discovers resource modules so callers don't need to maintain a
manual import list. Resources defined outside this package can be added with
`register_resource`.
"""

from __future__ import annotations

import pkgutil
from importlib import import_module
from typing import Any, TypeVar

from ..exceptions import UnknownResourceError
from .base import Resource, ResourceSpec

M = TypeVar("M", bound=type[Resource[Any]])


def _normalize(name: str) -> str:
    return (name or "").strip().lower()


def _load_resources() -> dict[str, ResourceSpec]:
    resources: dict[str, ResourceSpec] = {}

    package_name = __name__.rsplit(".", 1)[0]
    package = import_module(package_name)

    for module_info in pkgutil.iter_modules(package.__path__):  # type: ignore[attr-defined]
        name = module_info.name
        if name.startswith("_") or name in {"base", "registry"}:
            continue

        module = import_module(f"{package_name}.{name}")
        spec_any: Any = getattr(module, "SPEC", None)
        if not isinstance(spec_any, ResourceSpec):
            continue

        key = _normalize(spec_any.category)
        if not key:
            continue
        resources[key] = spec_any

    return resources


RESOURCES: dict[str, ResourceSpec] = _load_resources()


def register_resource(model: M) -> M:
    """Register a resource class under its category.

    Usable as a class decorator. Registering the same class twice is a no-op.

    Raises:
        ValueError: When another class already owns the category.
    """
    key = _normalize(model.category)
    current = RESOURCES.get(key)
    if current is not None and current.model is not model:
        raise ValueError(
            f"Category {model.category!r} is already registered to "
            f"{current.model.__name__}"
        )
    RESOURCES[key] = ResourceSpec.of(model)
    return model


def get_resource(category: str) -> ResourceSpec:
    """Lookup a resource by category name.

    Args:
        category: Category name (case and surrounding whitespace ignored).

    Returns:
        The registered `ResourceSpec`.

    Raises:
        UnknownResourceError: When no resource is registered.
    """
    key = _normalize(category)
    if not key:
        raise UnknownResourceError("Resource category is required")

    spec = RESOURCES.get(key)
    if spec is None:
        raise UnknownResourceError(f"Unknown resource: {category}")
    return spec


def decode_resource(category: str, data: bytes | str) -> Resource[Any]:
    """Decode a payload for the resource registered under `category`."""
    return get_resource(category).decode(data)
