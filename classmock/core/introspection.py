"""introspection.py — Lists the methods a class declares in its own body.

Callables found in ``vars(cls)`` count, in declaration order, including
methods wrapped by decorators such as ``functools.cache``. ``__call__`` is
mirrored too, so callable classes stay callable.
Skipped on purpose:
    __init__             → mirrored separately as the construction path
    other __dunder__s    → protocol hooks, not capability names
    _Cls__mangled        → private members
    property / staticmethod / classmethod / nested classes / data attributes
    inherited members    → never present in ``vars(cls)``

Called by: generator.py
Depends on: errors.py
"""

from __future__ import annotations

import inspect
import logging
import types
from dataclasses import dataclass

from classmock.core.errors import ConfigurationError

logger = logging.getLogger(__name__)

CONSTRUCTION_MEMBER = "__init__"
MIRRORED_DUNDERS = frozenset({"__call__"})
_NON_METHODS = (property, staticmethod, classmethod, types.ClassMethodDescriptorType)


@dataclass(frozen=True)
class DeclaredMethod:
    """One instance method declared directly on a class."""

    name: str
    is_async: bool
    doc: str | None = None


def _is_dunder(name: str) -> bool:
    return len(name) > 4 and name.startswith("__") and name.endswith("__")


def _is_mangled_private(class_definition: type, name: str) -> bool:
    # Python strips leading underscores of the class name when mangling.
    prefix = f"_{class_definition.__name__.lstrip('_')}__"
    return name.startswith(prefix)


def _is_skipped_name(class_definition: type, name: str, include_protected: bool) -> bool:
    if name in MIRRORED_DUNDERS:
        return False
    if name == CONSTRUCTION_MEMBER or _is_dunder(name):
        return True
    if _is_mangled_private(class_definition, name):
        return True
    return not include_protected and name.startswith("_")


def declared_methods(
    class_definition: object,
    *,
    include_protected: bool = True,
) -> list[DeclaredMethod]:
    """Return the instance methods declared directly on ``class_definition``.

    Args:
        class_definition: The class to introspect.
        include_protected: Keep ``_single_underscore`` methods.

    Returns:
        DeclaredMethod entries in declaration order.

    Raises:
        ConfigurationError: If ``class_definition`` is not a class.
    """
    if not inspect.isclass(class_definition):
        raise ConfigurationError(
            "NOT_A_CLASS",
            f"Cannot mock {class_definition!r}: expected a class, "
            f"got an instance of {type(class_definition).__name__}.",
        )

    methods: list[DeclaredMethod] = []
    for name, member in vars(class_definition).items():
        if _is_skipped_name(class_definition, name, include_protected):
            continue
        if isinstance(member, _NON_METHODS) or inspect.isclass(member):
            continue
        if not callable(member):
            continue
        methods.append(
            DeclaredMethod(
                name=name,
                is_async=inspect.iscoroutinefunction(member),
                doc=getattr(member, "__doc__", None),
            )
        )

    logger.debug(
        "Introspected %s: %d declared method(s)",
        class_definition.__qualname__,
        len(methods),
    )
    return methods


def declared_method_names(
    class_definition: object,
    *,
    include_protected: bool = True,
) -> list[str]:
    """Names of :func:`declared_methods`, in declaration order."""
    return [
        method.name
        for method in declared_methods(class_definition, include_protected=include_protected)
    ]
