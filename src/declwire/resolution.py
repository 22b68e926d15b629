from __future__ import annotations

import logging
from typing import Any, TypeVar

from declwire.constructables import Constructable, ResolvedDependencies
from declwire.container import Container, default_container
from declwire.exceptions import DeclwireInvalidConstructableError

T = TypeVar("T")

logger = logging.getLogger(__name__)
_MISSING: Any = object()


def resolve(constructable: Constructable[T], container: Container | None = None) -> T:
    """Return the value of ``constructable``, constructing it on first use.

    A value already present in ``container`` (cached or set as an override) is
    returned as is. Otherwise nested declarations in ``dependencies`` are
    resolved depth-first through the same container, plain values are passed
    through, ``construct`` is called once and its result is stored.

    Exceptions raised by ``construct`` propagate unchanged and leave no entry
    for the failing declaration, so the next call constructs it again.
    Declaration graphs must be acyclic; a cycle ends in ``RecursionError``.

    Args:
        constructable: Declaration to resolve.
        container: Container used as cache and override table. Defaults to
            ``default_container()``.

    Returns:
        The resolved value, identical for every call with the same container.

    Raises:
        DeclwireInvalidConstructableError: If ``constructable`` is not a
            ``Constructable``.

    """
    if not isinstance(constructable, Constructable):
        msg = f"Expected a Constructable, got {type(constructable).__name__}."
        raise DeclwireInvalidConstructableError(msg)
    if container is None:
        container = default_container()

    return _resolve(constructable, container)


def _resolve(constructable: Constructable[T], container: Container) -> T:
    value = container.get(constructable, _MISSING)
    if value is not _MISSING:
        logger.debug("Using stored value for %r", constructable)
        return value

    dependencies = _resolve_dependencies(constructable, container)
    logger.debug("Constructing %r", constructable)
    value = constructable.construct(dependencies)
    container.set(constructable, value)
    return value


def _resolve_dependencies(
    constructable: Constructable[Any],
    container: Container,
) -> ResolvedDependencies:
    return {
        key: _resolve(dependency, container) if isinstance(dependency, Constructable) else dependency
        for key, dependency in constructable.dependencies.items()
    }
