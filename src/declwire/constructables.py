from __future__ import annotations

import itertools
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Generic, TypeAlias, TypeVar

from declwire.exceptions import DeclwireInvalidConstructableError

T = TypeVar("T")

DependencyKey: TypeAlias = Any
"""A name under which a dependency is handed to ``construct``."""

ResolvedDependencies: TypeAlias = dict[DependencyKey, Any]
"""Dependencies with every nested ``Constructable`` replaced by its value."""

ConstructableSlot: TypeAlias = int
"""A unique slot number assigned to each declaration."""

_SLOT_COUNTER = itertools.count(1)


@dataclass(frozen=True, slots=True, eq=False)
class Constructable(Generic[T]):
    """A recipe for a value of type ``T``.

    Declarations compare and hash by identity, so two declarations with the
    same dependencies and the same ``construct`` are still cached separately.
    Use ``constructable`` to create them.
    """

    dependencies: Mapping[DependencyKey, Any]
    """Nested declarations or plain values, keyed by the name ``construct`` sees."""
    construct: Callable[[ResolvedDependencies], T]
    """Builds the value from the resolved dependencies."""

    slot: ConstructableSlot = field(init=False, default_factory=lambda: next(_SLOT_COUNTER))
    """A unique slot number assigned to this declaration."""

    def __repr__(self) -> str:
        construct_name = getattr(self.construct, "__qualname__", repr(self.construct))
        return (
            f"{type(self).__name__}(slot={self.slot}, construct={construct_name}, "
            f"dependencies={list(self.dependencies)!r})"
        )


def constructable(
    dependencies: Mapping[DependencyKey, Any],
    construct: Callable[[ResolvedDependencies], T],
) -> Constructable[T]:
    """Declare a value together with the dependencies it is built from.

    Nothing is resolved here. ``construct`` runs later, once per container,
    when the declaration is passed to ``resolve``.

    Examples:
        .. code-block:: python

            add = constructable({}, lambda _: lambda a, b: a + b)
            calculator = constructable({"add": add}, lambda deps: Calculator(**deps))

    Args:
        dependencies: Mapping of names to other declarations or plain values.
            Plain values are passed to ``construct`` unchanged. The mapping is
            copied, so later changes to it do not affect the declaration.
        construct: Callable receiving a dict with the same keys as
            ``dependencies`` where each declaration was replaced by its
            resolved value.

    Returns:
        A new immutable ``Constructable``.

    Raises:
        DeclwireInvalidConstructableError: If ``dependencies`` is not a mapping
            or ``construct`` is not callable.

    """
    if not isinstance(dependencies, Mapping):
        msg = f"Dependencies must be a mapping, got {type(dependencies).__name__}."
        raise DeclwireInvalidConstructableError(msg)
    if not callable(construct):
        msg = f"Construct must be callable, got {type(construct).__name__}."
        raise DeclwireInvalidConstructableError(msg)

    return Constructable(
        dependencies=MappingProxyType(dict(dependencies)),
        construct=construct,
    )
